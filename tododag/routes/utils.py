from fastapi import Path

item_id_path = Path(
    ...,
    min_length=1,
    description="Opaque identifier of the item, assigned by the caller.",
)
