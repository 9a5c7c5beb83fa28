from lingo_api.extensions import db


class Lesson(db.Model):
    __tablename__ = "lessons"

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    title = db.Column(db.String(255), nullable=False)
    order = db.Column(db.Integer, nullable=False, default=0)

    # Relationships
    challenges = db.relationship(
        "Challenge",
        back_populates="lesson",
        cascade="all, delete-orphan",
        order_by="Challenge.order",
        lazy="select",
    )

    def __repr__(self):
        return f"<Lesson id={self.id} title={self.title!r}>"
