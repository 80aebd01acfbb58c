# No dependencies
from enum import Enum


class ChannelKind(str, Enum):
    BYTE = "byte"
    DEGREES = "degrees"
    PERCENT = "percent"
    UNIT = "unit"

channel_maxima = {
    ChannelKind.BYTE: 255,
    ChannelKind.DEGREES: 360,
    ChannelKind.PERCENT: 100,
    ChannelKind.UNIT: 1.0,
}

# Upper bound handed to Generator.integers (exclusive)
channel_random_bounds = {
    ChannelKind.BYTE: 256,
    ChannelKind.DEGREES: 360,
    ChannelKind.PERCENT: 101,
}

HUE_360 = 360
ALPHA_DECIMALS = 2
