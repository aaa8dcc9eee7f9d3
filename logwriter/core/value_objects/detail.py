from typing import Any, Dict, Iterable, NamedTuple, Tuple


class Detail(NamedTuple):
    """Labelled value attached to a log entry as structured side data"""
    label: str
    value: Any

    @classmethod
    def from_pair(cls, pair: Any) -> 'Detail':
        """Create Detail from any (label, value) pair"""
        if isinstance(pair, Detail):
            return pair
        if not isinstance(pair, tuple) or len(pair) != 2:
            raise TypeError(f"Detail must be a (label, value) pair, got {pair!r}")

        label, value = pair
        return cls(label=str(label).strip() if label is not None else "", value=value)


def is_detail_pair(value: Any) -> bool:
    """Check if value has the (label, value) detail shape"""
    return isinstance(value, tuple) and len(value) == 2


def details_to_dict(details: Iterable[Tuple[str, Any]]) -> Dict[str, Any]:
    """Convert detail pairs to an ordered dictionary, later labels win"""
    result: Dict[str, Any] = {}
    for pair in details or ():
        detail = Detail.from_pair(pair)
        if detail.label:
            result[detail.label] = detail.value
    return result
