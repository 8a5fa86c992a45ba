from content_builder.extensions import db
from .base import BaseModel, local_time_now


class MediaAsset(BaseModel):
    __tablename__ = "media_assets"

    url = db.Column(db.String(512), nullable=False)
    type = db.Column(db.String(20), nullable=False, default="image")  # image, video
    size_kb = db.Column(db.Float, nullable=False, default=0)
    filename = db.Column(db.String(255), nullable=False)
    uploaded_at = db.Column(db.DateTime, default=local_time_now, index=True)
