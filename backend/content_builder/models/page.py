from content_builder.extensions import db
from .base import BaseModel


class Page(BaseModel):
    __tablename__ = "pages"

    title = db.Column(db.String(200), nullable=False)
    slug = db.Column(db.String(200), nullable=False, unique=True, index=True)
    seo = db.Column(db.JSON(none_as_null=True), default=dict)

    # Ordered list of section payloads; list order is render order
    content_sections = db.Column(db.JSON, nullable=False, default=list)
