from .sizer import (
    PlanningResult,
    PlanningSummary,
    PlanningTaak,
    add_task,
    days_for_hours,
    reorder_tasks,
    size_planning,
    summarize_tasks,
    update_task_status,
)
from .voorcalculatie import (
    VoorcalculatieData,
    build_voorcalculatie,
    duration_with_buffer,
    voorcalculatie_for_offerte,
    voorcalculatie_from_hours,
    werkdagen,
)

__all__ = [
    "PlanningResult",
    "PlanningSummary",
    "PlanningTaak",
    "VoorcalculatieData",
    "add_task",
    "build_voorcalculatie",
    "days_for_hours",
    "duration_with_buffer",
    "reorder_tasks",
    "size_planning",
    "summarize_tasks",
    "update_task_status",
    "voorcalculatie_for_offerte",
    "voorcalculatie_from_hours",
    "werkdagen",
]
