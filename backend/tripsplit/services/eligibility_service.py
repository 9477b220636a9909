"""
Eligibility rules deciding who may share an expense of a given category.
"""
from typing import Iterable, List, Optional

NON_VEG_CATEGORY = "food-non-veg"
DRINKS_CATEGORY = "drinks"


def is_eligible(friend, category: Optional[str]) -> bool:
    """Check whether a friend may be charged for an expense category."""
    if category == NON_VEG_CATEGORY:
        return not friend.is_vegetarian
    if category == DRINKS_CATEGORY:
        return friend.is_drinker
    # Vegetarian food and every other category are for everyone
    return True


def get_eligible_friends(friends: Iterable, category: Optional[str]) -> List:
    """Filter friends down to those eligible for the category."""
    return [friend for friend in friends if is_eligible(friend, category)]
