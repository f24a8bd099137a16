from typing import Annotated, Any, ClassVar, Dict, List, Optional
from pydantic import AfterValidator, BaseModel, ConfigDict

from ..utils.util import to_camel


def _reference(value: Any) -> Any:
    # Ids of resources registered with a real engine are deferred outputs, not strings
    if isinstance(value, (bool, int, float, list, tuple, dict, set)):
        raise ValueError(f"expected a resource id or a deferred engine output, got {type(value).__name__}")
    return value


ResourceReference = Annotated[Any, AfterValidator(_reference)]


class ArgsModel(BaseModel):
    """
    Base class of every argument record.

    Fields are snake_case in Python and camelCase on the wire; fields whose
    wire name does not follow plain camelCase (``osDiskSizeGB``,
    ``enableFIPS``...) declare an explicit alias. Records are mutable and
    may be incomplete until their builder validates them, but every value
    assigned to them is validated against the field type.
    """
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        arbitrary_types_allowed=True,
        validate_assignment=True,
        extra="forbid",
    )

    # Field holding the physical name of a top-level resource
    name_field: ClassVar[Optional[str]] = None
    # Field holding the tag map, None for records without tags
    tags_field: ClassVar[Optional[str]] = None

    def physical_name(self) -> Any:
        if self.name_field is None:
            return None
        return getattr(self, self.name_field)

    def to_inputs(self) -> Dict[str, Any]:
        """Wire form handed to an engine: camelCase keys, unset fields dropped."""
        return self.model_dump(by_alias=True, exclude_none=True)

    def is_empty(self) -> bool:
        return not self.to_inputs()

    def append_to(self, field: str, *values: Any) -> List[Any]:
        """Append to a list field, creating the list on first use; call order is kept."""
        setattr(self, field, list(getattr(self, field) or []) + list(values))
        return getattr(self, field)

    def put_in(self, field: str, key: str, value: Any) -> Dict[str, Any]:
        """Set one entry of a mapping field, creating the mapping on first use."""
        current = dict(getattr(self, field) or {})
        current[key] = value
        setattr(self, field, current)
        return getattr(self, field)
