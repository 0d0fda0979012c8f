from pydantic import BaseModel

class RocketInfoResponse(BaseModel):
    Question: str
    Response: str

class ErrorResponse(BaseModel):
    Error: str
    Details: str
