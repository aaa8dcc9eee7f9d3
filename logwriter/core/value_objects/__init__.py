"""Value objects"""

from .detail import Detail, details_to_dict, is_detail_pair
from .scope import NO_SCOPE, has_scope

__all__ = ['Detail', 'details_to_dict', 'is_detail_pair', 'NO_SCOPE', 'has_scope']
