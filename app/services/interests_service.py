"""
Room interest validation and normalization.

Interests are a mapping of catalogue category to a list of tags, e.g.
{"music": ["jazz", "rock"], "food": ["coffee"]}. Validation is pure and must
pass before set_interests_for_room is called.
"""

from app.core.constants import MAX_INTERESTS_PER_CATEGORY, ROOM_INTEREST_CATALOGUE
from app.models.room import Room, RoomInterests


def _clean_tag(tag: str) -> str:
    return tag.strip().lower()


def is_valid_room_interest(tags) -> bool:
    """
    Check interests against the fixed catalogue.
    :param tags: Raw interests from the request
    :return: True if every category and tag is known and within limits
    """
    if not isinstance(tags, dict):
        return False

    for category, category_tags in tags.items():
        allowed = ROOM_INTEREST_CATALOGUE.get(category)
        if allowed is None:
            return False
        if not isinstance(category_tags, list):
            return False
        if not all(isinstance(tag, str) for tag in category_tags):
            return False

        cleaned = {_clean_tag(tag) for tag in category_tags}
        if not cleaned.issubset(allowed):
            return False
        if len(cleaned) > MAX_INTERESTS_PER_CATEGORY:
            return False

    return True


def normalize_interests(tags: dict[str, list[str]]) -> dict[str, list[str]]:
    """
    Canonical form of valid interests: lower-case, de-duplicated, catalogue
    ordered, empty categories dropped. Idempotent.
    :param tags: Interests that passed is_valid_room_interest
    :return: Normalized interests
    """
    normalized = {}
    for category, allowed in ROOM_INTEREST_CATALOGUE.items():
        chosen = {_clean_tag(tag) for tag in tags.get(category, [])}
        ordered = [tag for tag in allowed if tag in chosen]
        if ordered:
            normalized[category] = ordered
    return normalized


def set_interests_for_room(tags: dict[str, list[str]], room: Room) -> None:
    """
    Replace the interests stored on a room.
    :param tags: Interests that passed is_valid_room_interest
    :param room: Room to write to
    """
    normalized = normalize_interests(tags)
    if room.room_interests is None:
        room.room_interests = RoomInterests(tags=normalized)
    else:
        room.room_interests.tags = normalized
