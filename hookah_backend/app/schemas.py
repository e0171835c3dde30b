# schemas.py  (catalog / mix builder / guest gallery)

from __future__ import annotations
from enum import Enum
from typing import List, Optional, Any, Dict
from pydantic import BaseModel, Field, ConfigDict


# ===================== Enums =====================

class PartOp(str, Enum):
    ADD = "add"
    UPDATE = "update"
    REMOVE = "remove"


# ===================== Catalog =====================

class Flavor(BaseModel):
    id: Optional[str] = None        # derived from brand+name when absent
    brand: str = ""
    name: str = ""
    description: Optional[str] = None
    tags: List[str] = []
    strength10: Optional[float] = None

    model_config = ConfigDict(extra="allow")


class FlavorIn(BaseModel):
    id: Optional[str] = None
    brand: Optional[str] = None
    name: Optional[str] = None
    title: Optional[str] = None      # legacy alias for name
    description: Optional[str] = None
    tags: Optional[List[str]] = None
    strength10: Optional[float] = None

    model_config = ConfigDict(extra="allow")


class FlavorPatch(BaseModel):
    brand: Optional[str] = None
    name: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    tags: Optional[List[str]] = None
    strength10: Optional[float] = None


# ===================== Mix =====================

class MixPart(BaseModel):
    flavorId: str
    # loose on purpose: the core coerces/clamps, garbage degrades to 0
    percent: Any = 0


class MixDraft(BaseModel):
    id: Optional[str] = None
    title: str = ""
    parts: List[MixPart] = []
    notes: str = ""


class GuestMixIn(MixDraft):
    author: Optional[str] = None
    userName: Optional[str] = None   # Telegram WebApp first_name, if any

    model_config = ConfigDict(extra="ignore")


class GuestMix(BaseModel):
    id: str
    title: str
    parts: List[Dict[str, Any]]
    notes: str = ""
    author: str
    createdAt: str
    taste: Optional[str] = None
    strength10: Optional[float] = None
    likers: List[str] = []


class MixPreview(BaseModel):
    total: float
    valid: bool
    strength10: Optional[float] = None
    band: str
    taste: Optional[str] = None


class PartEditIn(BaseModel):
    parts: List[MixPart] = []
    op: PartOp
    flavorId: str = ""
    value: Any = None


class PartEditOut(BaseModel):
    parts: List[Dict[str, Any]]
    total: float


# ===================== Likes =====================

class LikeIn(BaseModel):
    userId: str = Field(default="anon")


class LikeOut(BaseModel):
    ok: bool = True
    liked: bool
    likes: int = 0
