from fastapi import APIRouter, Depends, HTTPException, Response, status
from workout_log.deps.service import get_service
from workout_log.repositories import WriteResult
from workout_log.schemas import WorkoutCreate, WorkoutProgress, WorkoutRead
from workout_log.services import WorkoutService

router = APIRouter(prefix="/workouts", tags=["workouts"])

@router.get("", response_model=list[WorkoutRead])
def list_workouts(service: WorkoutService = Depends(get_service)):
    # Workouts of the selected day, newest first
    return service.workouts

@router.post("", response_model=WorkoutRead, status_code=status.HTTP_201_CREATED)
async def create_workout(payload: WorkoutCreate, service: WorkoutService = Depends(get_service)):
    return await service.add_workout(payload.to_draft(service.selected_date))

@router.get("/{workout_id}", response_model=WorkoutRead)
async def get_workout(workout_id: int, service: WorkoutService = Depends(get_service)):
    workout = await service.get_workout(workout_id)
    if not workout:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Workout not found")
    return workout

@router.delete("/{workout_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_workout(workout_id: int, service: WorkoutService = Depends(get_service)):
    result = await service.delete_workout(workout_id)
    if result is WriteResult.not_found:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Workout not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)

@router.get("/{workout_id}/progress", response_model=WorkoutProgress)
def workout_progress(workout_id: int, service: WorkoutService = Depends(get_service)):
    return WorkoutProgress(workout_id=workout_id, progress=service.progress_for_workout(workout_id))
