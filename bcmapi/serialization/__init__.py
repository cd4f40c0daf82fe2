"""Codec engine: enum tables, item codecs, error detection and the registry.

Only the enum tables are imported eagerly; the model modules depend on
them, while the codecs and the registry depend on the models.
"""

from .enums import EnumNameMap, name_map_for, register_name_map, registered_enums

__all__ = ["EnumNameMap", "name_map_for", "register_name_map", "registered_enums"]
