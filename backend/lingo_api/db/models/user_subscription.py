from datetime import datetime, timedelta, timezone
from lingo_api.extensions import db

# Grace period after current_period_end during which the plan stays active
SUBSCRIPTION_GRACE = timedelta(days=1)


class UserSubscription(db.Model):
    __tablename__ = "user_subscriptions"

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    user_id = db.Column(
        db.String(36),
        db.ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
    )
    stripe_customer_id = db.Column(db.String(255), nullable=True)
    stripe_price_id = db.Column(db.String(255), nullable=True)
    current_period_end = db.Column(db.DateTime(timezone=True), nullable=True)

    # Relationships
    user = db.relationship("User", back_populates="subscription")

    def is_active_at(self, now: datetime) -> bool:
        end = self.current_period_end
        if end is None:
            return False
        # SQLite hands back naive datetimes; they are stored as UTC
        if end.tzinfo is None:
            end = end.replace(tzinfo=timezone.utc)
        return end + SUBSCRIPTION_GRACE > now

    @property
    def is_active(self) -> bool:
        return self.is_active_at(datetime.now(timezone.utc))

    def __repr__(self):
        return f"<UserSubscription user={self.user_id} end={self.current_period_end}>"
