from lingo_api.extensions import db

DEFAULT_HEARTS = 5


class UserProgress(db.Model):
    __tablename__ = "user_progress"

    user_id = db.Column(
        db.String(36),
        db.ForeignKey("users.id", ondelete="CASCADE"),
        primary_key=True,
    )
    hearts = db.Column(db.Integer, nullable=False, default=DEFAULT_HEARTS)
    points = db.Column(db.Integer, nullable=False, default=0)

    # Relationships
    user = db.relationship("User", back_populates="progress")

    def __repr__(self):
        return f"<UserProgress user={self.user_id} hearts={self.hearts}>"
