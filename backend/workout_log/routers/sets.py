from fastapi import APIRouter, Depends
from workout_log.deps.service import get_service
from workout_log.schemas import SetRead, SetUpdate
from workout_log.services import WorkoutService

router = APIRouter(prefix="/workouts", tags=["sets"])

@router.get("/{workout_id}/sets", response_model=list[SetRead])
async def list_sets(workout_id: int, service: WorkoutService = Depends(get_service)):
    return await service.load_sets(workout_id)

@router.patch("/{workout_id}/sets/{set_id}", response_model=list[SetRead])
async def toggle_set(
    workout_id: int,
    set_id: int,
    payload: SetUpdate,
    service: WorkoutService = Depends(get_service),
):
    await service.toggle_set_done(workout_id, set_id, payload.done)
    # An unknown set heals the cache instead of failing; report what is now held
    return service.sets_for(workout_id)
