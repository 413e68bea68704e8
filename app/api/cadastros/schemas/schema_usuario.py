from datetime import datetime
from typing import Optional, Literal

from pydantic import BaseModel, ConfigDict, constr


class UserResponse(BaseModel):
    id: int
    open_id: str
    nome: Optional[str] = None
    email: Optional[str] = None
    login_method: str
    role: Literal["user", "admin"]
    created_at: datetime
    last_signed_in: datetime

    model_config = ConfigDict(from_attributes=True)


class OAuthSessionRequest(BaseModel):
    """Identidade já resolvida pelo callback do provedor OAuth."""
    open_id: constr(min_length=1, max_length=64)
    nome: Optional[constr(max_length=255)] = None
    email: Optional[constr(max_length=320)] = None
    login_method: Literal["oauth"] = "oauth"
