"""
Checks and post-processing for extracted activities.

- validate_activity: dict of fields -> Activity, or pydantic.ValidationError.
- dedupe_activities: collapse the same payment seen in two documents.

A dividend shows up twice for quirion customers: once as a line in the
Kontoauszug and once as its own Erträgnisabrechnung. Both extractors build
the dividend the same way (no WKN, gross amount) so the two copies compare
equal here.
"""

from typing import Any, Dict, List, Mapping, Tuple

from quirion_import.models.schemas import Activity


def validate_activity(record: Mapping[str, Any]) -> Activity:
    """
    Build the Activity and let pydantic enforce the schema rules.

    ValidationError is not wrapped: callers see exactly which field failed.
    """
    return Activity.model_validate(dict(record))


def _dedupe_key(activity: Activity) -> Tuple:
    """
    We consider an activity unique by:
    - broker
    - type
    - date
    - isin
    - shares
    - amount
    """
    return (
        activity.broker,
        activity.type,
        activity.date,
        activity.isin,
        activity.shares,
        activity.amount,
    )


def dedupe_activities(activities: List[Activity]) -> List[Activity]:
    """Keep the first activity for each unique key, in input order."""
    seen: Dict[Tuple, Activity] = {}
    for activity in activities:
        seen.setdefault(_dedupe_key(activity), activity)
    return list(seen.values())
