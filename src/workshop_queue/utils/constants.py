"""Application-wide constants."""

# Work order statuses
JOB_STATUSES = [
    "pending",
    "in_progress",
    "waiting_on_parts",
    "completed",
    "cancelled",
]

JOB_STATUS_LABELS = {
    "pending": "Pending",
    "in_progress": "In Progress",
    "waiting_on_parts": "Waiting on Parts",
    "completed": "Completed",
    "cancelled": "Cancelled",
}

# Statuses that still need workshop time
ACTIVE_STATUSES = ["pending", "in_progress", "waiting_on_parts"]

# Work order priorities (lowest first)
JOB_PRIORITIES = ["low", "normal", "high", "urgent"]

JOB_PRIORITY_LABELS = {
    "low": "Low",
    "normal": "Normal",
    "high": "High",
    "urgent": "Urgent",
}

# Missing or unrecognized priorities count as this one
DEFAULT_PRIORITY = "normal"

# ── Priority scoring weights ─────────────────────────────────────
IN_PROGRESS_WEIGHT = 50
PRIORITY_WEIGHTS = {
    "urgent": 100,
    "high": 60,
    "normal": 20,
    "low": 0,
}
CUSTOMER_WAITING_WEIGHT = 80
PRIORITY_ACCOUNT_WEIGHT = 40

# ── Ranking ──────────────────────────────────────────────────────
SORT_MODES = ["priority", "newest", "oldest"]

# Named status subsets offered by the work order list
JOB_VIEWS = {
    "active": list(ACTIVE_STATUSES),
    "pending": ["pending"],
    "in_progress": ["in_progress"],
    "waiting_on_parts": ["waiting_on_parts"],
    "completed": ["completed"],
    "all": list(JOB_STATUSES),
}

# ── Roles & permissions ──────────────────────────────────────────
# Ordered by privilege level (highest first)
ROLES = ["owner", "manager", "mechanic", "parts", "front_desk"]

# Owner is the only role with unrestricted access
FULL_ACCESS_ROLES = ["owner"]

PERMISSION_KEYS = [
    "jobs_view",
    "jobs_add",
    "jobs_edit",
    "jobs_delete",
    "jobs_assign",
    "jobs_reprioritize",
    "parts_view",
    "parts_edit",
    "pos_sell",
    "accounting_view",
    "payroll_view",
    "settings_users",
    "settings_permissions",
]

PERMISSION_LABELS = {
    "jobs_view": "View Work Orders",
    "jobs_add": "Add Work Orders",
    "jobs_edit": "Edit Work Orders",
    "jobs_delete": "Delete Work Orders",
    "jobs_assign": "Assign Mechanics",
    "jobs_reprioritize": "Change Job Priority",
    "parts_view": "View Parts",
    "parts_edit": "Edit Parts",
    "pos_sell": "Use Point of Sale",
    "accounting_view": "View Accounting",
    "payroll_view": "View Payroll",
    "settings_users": "Manage Users",
    "settings_permissions": "Manage Role Permissions",
}

# Permissions that make up the settings screen
SETTINGS_PERMISSIONS = [k for k in PERMISSION_KEYS if k.startswith("settings_")]

# Default permissions for each role (True = granted)
DEFAULT_ROLE_PERMISSIONS: dict[str, list[str]] = {
    "owner": list(PERMISSION_KEYS),  # All permissions
    "manager": [
        "jobs_view", "jobs_add", "jobs_edit", "jobs_delete",
        "jobs_assign", "jobs_reprioritize",
        "parts_view", "parts_edit",
        "pos_sell", "accounting_view",
    ],
    "mechanic": [
        "jobs_view", "jobs_edit",
        "parts_view",
    ],
    "parts": [
        "jobs_view",
        "parts_view", "parts_edit",
        "pos_sell",
    ],
    "front_desk": [
        "jobs_view", "jobs_add", "jobs_reprioritize",
        "parts_view",
        "pos_sell",
    ],
}
