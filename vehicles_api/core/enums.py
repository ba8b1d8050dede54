from enum import Enum


class Condition(str, Enum):
    USED = "USED"
    NEW = "NEW"

    def __str__(self):
        return self.value


class UpstreamService(str, Enum):
    PRICING = "pricing"
    MAPS = "maps"

    def __str__(self):
        return self.value
