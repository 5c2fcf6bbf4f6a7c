# utils/base_model.py
from pydantic import BaseModel


class ImmutableModel(BaseModel):
    """
    Base class for the geometric value types.

    Instances are frozen after creation, which also makes them hashable by
    field values. A value that needs to change is rebuilt through its
    constructor, so every instance has passed its model's validation.
    """
    model_config = {
        "frozen": True,
    }
