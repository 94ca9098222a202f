from pagebuilder.extensions import db
from pagebuilder.utils.timestamps import parse_timestamp


class PageRecord(db.Model):
    __tablename__ = "citydirect_pages"

    slug = db.Column(db.String(200), primary_key=True)
    city_code = db.Column(db.String(50), nullable=True)
    status = db.Column(db.String(20), nullable=False, default="DRAFT", index=True)
    seo = db.Column(db.JSON(none_as_null=True), nullable=False, default=dict)
    content = db.Column(db.JSON, nullable=False, default=list)

    created_at = db.Column(db.DateTime(timezone=True), nullable=False)
    updated_at = db.Column(db.DateTime(timezone=True), nullable=False, index=True)
    published_at = db.Column(db.DateTime(timezone=True), nullable=True, index=True)

    def to_record(self):
        return {
            "slug": self.slug,
            "city_code": self.city_code,
            "status": self.status,
            "seo": self.seo or {},
            "content": self.content or [],
            # SQLite drops tzinfo on the way back
            "created_at": parse_timestamp(self.created_at),
            "updated_at": parse_timestamp(self.updated_at),
            "published_at": parse_timestamp(self.published_at),
        }
