from enum import Enum


class StaffRole(str, Enum):
    MANAGER = "Manager"
    WAITER = "Waiter"
    CHEF = "Chef"
    CASHIER = "Cashier"


class AttendanceStatus(str, Enum):
    PRESENT = "present"
    ABSENT = "absent"
