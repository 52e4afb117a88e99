from pydantic import BaseModel, Field

class PricePoint(BaseModel):
    timestamp: int  # epoch millis
    close: float = Field(gt=0)
