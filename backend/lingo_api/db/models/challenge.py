from lingo_api.extensions import db

CHALLENGE_TYPES = ("SELECT", "ASSIST")


class Challenge(db.Model):
    __tablename__ = "challenges"

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    lesson_id = db.Column(
        db.Integer,
        db.ForeignKey("lessons.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    # "SELECT" | "ASSIST"
    type = db.Column(db.String(20), nullable=False)
    question = db.Column(db.Text, nullable=False)
    order = db.Column(db.Integer, nullable=False)

    # Relationships
    lesson = db.relationship("Lesson", back_populates="challenges")
    options = db.relationship(
        "ChallengeOption",
        back_populates="challenge",
        cascade="all, delete-orphan",
        order_by="ChallengeOption.id",
        lazy="select",
    )
    progress = db.relationship(
        "ChallengeProgress",
        back_populates="challenge",
        cascade="all, delete-orphan",
        lazy="dynamic",
    )

    def __repr__(self):
        return f"<Challenge id={self.id} lesson={self.lesson_id} order={self.order}>"


class ChallengeOption(db.Model):
    __tablename__ = "challenge_options"

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    challenge_id = db.Column(
        db.Integer,
        db.ForeignKey("challenges.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    text = db.Column(db.Text, nullable=False)
    correct = db.Column(db.Boolean, nullable=False, default=False)
    image_src = db.Column(db.Text, nullable=True)
    audio_src = db.Column(db.Text, nullable=True)

    # Relationships
    challenge = db.relationship("Challenge", back_populates="options")

    def __repr__(self):
        return f"<ChallengeOption id={self.id} challenge={self.challenge_id}>"
