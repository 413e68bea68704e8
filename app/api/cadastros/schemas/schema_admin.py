from datetime import datetime
from pydantic import BaseModel, ConfigDict


class AdminOut(BaseModel):
    id: int
    username: str
    email: str
    nome: str
    ativo: bool
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
