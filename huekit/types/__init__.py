from .channel_type import ChannelKind, channel_maxima, HUE_360
from .color_types import (
    ColorSpace,
    COLOR_SPACES,
    HUE_SPACES,
    ALPHA_SPACES,
    OPAQUE,
    is_hue_space,
    is_alpha_space,
    normalize_space,
)

__all__ = [
    'ChannelKind',
    'channel_maxima',
    'HUE_360',
    'ColorSpace',
    'COLOR_SPACES',
    'HUE_SPACES',
    'ALPHA_SPACES',
    'OPAQUE',
    'is_hue_space',
    'is_alpha_space',
    'normalize_space',
]
