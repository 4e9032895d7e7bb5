from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class ProductOut(BaseModel):
    id: Optional[str] = Field(None, alias="_id")
    name: str
    category: str = ""
    cost: float
    rating: int = 0
    image: Optional[str] = ""

    model_config = ConfigDict(populate_by_name=True)
