# schemas/content_model.py
from __future__ import annotations
from typing import List, Optional
from pydantic import BaseModel, Field

# ---------- Content Model ----------

class M2Namespace(BaseModel):
    uri: str
    prefix: str

class M2Model(BaseModel):
    """Alfresco content model (M2 dictionary model) generated for one process."""
    name: Optional[str] = None
    description: Optional[str] = None
    author: Optional[str] = None
    version: Optional[str] = None
    namespaces: List[M2Namespace] = Field(default_factory=list)
    imports: List[M2Namespace] = Field(default_factory=list)
