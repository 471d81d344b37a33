"""
Grocery Model

Contains the GroceryItem model. Items are a per-week snapshot derived
from the meal plan and are not linked to recipes by foreign key.
"""

from .base import db


class GroceryItem(db.Model):
    """Grocery list item for one week with a checked flag."""
    __tablename__ = 'grocery_list'
    __table_args__ = {'sqlite_autoincrement': True}

    id = db.Column(db.Integer, primary_key=True)
    item_name = db.Column(db.Text, nullable=False)
    quantity = db.Column(db.Text, default='')
    is_checked = db.Column(db.Boolean, nullable=False, default=False)
    week_start_date = db.Column(db.String(10), nullable=False, index=True)

    def to_dict(self):
        return {
            'id': self.id,
            'item_name': self.item_name,
            'quantity': self.quantity,
            'is_checked': bool(self.is_checked),
            'week_start_date': self.week_start_date,
        }
