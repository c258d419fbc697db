from pydantic import BaseModel
from typing import Optional


# POST /refresh_token body (every field optional)
class RefreshRequest(BaseModel):
    refresh_token: Optional[str] = None


class RefreshResponse(BaseModel):
    access_token: str
    expires_in: int
