from fastapi import APIRouter, Depends
from workout_log.deps.service import get_service
from workout_log.schemas import DayOverview, DaySelect
from workout_log.services import WorkoutService

router = APIRouter(prefix="/day", tags=["day"])

def overview(service: WorkoutService) -> DayOverview:
    return DayOverview(
        date=service.selected_date,
        workouts=service.workouts,
        completion_percent=service.total_completion_for_selected_date(),
        revision=service.revision,
    )

@router.get("", response_model=DayOverview)
def get_day(service: WorkoutService = Depends(get_service)):
    return overview(service)

@router.put("", response_model=DayOverview)
async def select_day(payload: DaySelect, service: WorkoutService = Depends(get_service)):
    await service.select_date(payload.date)
    return overview(service)

@router.post("/reload", response_model=DayOverview)
async def reload_day(service: WorkoutService = Depends(get_service)):
    await service.reload()
    return overview(service)
