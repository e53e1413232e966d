from enum import Enum


class VehicleClass(str, Enum):
    TWO_WHEELER = "two-wheeler"
    THREE_WHEELER = "three-wheeler"
    FOUR_WHEELER = "four-wheeler"

    @property
    def label(self) -> str:
        return _LABELS[self]

    @classmethod
    def _missing_(cls, value):
        # Accept the form labels ("2 Wheeler") as aliases.
        if isinstance(value, str):
            wanted = value.strip().lower()
            for member in cls:
                if member.label.lower() == wanted or member.value == wanted:
                    return member
        return None

    def __str__(self):
        return self.value


_LABELS = {
    VehicleClass.TWO_WHEELER: "2 Wheeler",
    VehicleClass.THREE_WHEELER: "3 Wheeler",
    VehicleClass.FOUR_WHEELER: "4 Wheeler",
}


class ServiceType(str, Enum):
    PREMIUM = "Premium Service"
    REGULAR = "Regular Service"

    @classmethod
    def for_membership(cls, is_premium: bool) -> "ServiceType":
        return cls.PREMIUM if is_premium else cls.REGULAR

    def __str__(self):
        return self.value


class ErrorKind(str, Enum):
    VALIDATION = "validation_error"
    STORAGE = "storage_error"
    NOTIFICATION = "notification_error"

    def __str__(self):
        return self.value
