"""Share page schemas."""
from pydantic import BaseModel


class ShareContent(BaseModel):
    """Everything the share page and its preview image render."""
    name: str
    title: str
    description: str
    origin: str
    url: str  # Canonical URL of the share page itself
    image_url: str
