from lingo_api.extensions import db


class ChallengeProgress(db.Model):
    """
    One row per attempt record of a user on a challenge.
    A challenge counts as completed for a user only when every one of the
    user's rows for it is marked completed.
    """
    __tablename__ = "challenge_progress"

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    user_id = db.Column(
        db.String(36),
        db.ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    challenge_id = db.Column(
        db.Integer,
        db.ForeignKey("challenges.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    completed = db.Column(db.Boolean, nullable=False, default=False)

    # Relationships
    challenge = db.relationship("Challenge", back_populates="progress")

    def __repr__(self):
        return (
            f"<ChallengeProgress user={self.user_id} "
            f"challenge={self.challenge_id} completed={self.completed}>"
        )
