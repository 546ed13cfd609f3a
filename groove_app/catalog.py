from .defaults import DEFAULT_EXERCISES
from .models import MIN_REPS, Exercise, ExerciseType
from .storage import load_exercises, save_exercises


def seed():
    """Fresh copies of the built-in exercises at their starting values."""
    return [Exercise(**entry) for entry in DEFAULT_EXERCISES]


class ExerciseCatalog:
    """
    The user's exercises keyed by id, persisted under the `exercises` key.

    Lookups for an unknown id return None and mutations on one are no-ops.
    """

    def __init__(self, store):
        self.store = store
        self._exercises = {}

    def load(self):
        stored = load_exercises(self.store)
        if stored:
            self._exercises = {e.id: e for e in stored}
        else:
            # first launch, or nothing usable on disk
            self._exercises = {e.id: e for e in seed()}
            self.save()
        return self

    def save(self):
        save_exercises(self.store, list(self._exercises.values()))

    def all(self):
        return list(self._exercises.values())

    def by_id(self, exercise_id: str):
        return self._exercises.get(exercise_id)

    def of_type(self, exercise_type: ExerciseType):
        return [e for e in self._exercises.values() if e.type == exercise_type]

    def strength(self):
        return self.of_type(ExerciseType.STRENGTH)

    def mobility(self):
        return self.of_type(ExerciseType.MOBILITY)

    def set_enabled(self, exercise_id: str, enabled: bool):
        exercise = self.by_id(exercise_id)
        if exercise is None:
            return None
        exercise.is_enabled = bool(enabled)
        self.save()
        return exercise

    def adjust_reps(self, exercise_id: str, new_reps: int):
        exercise = self.by_id(exercise_id)
        if exercise is None:
            return None
        exercise.current_reps = max(MIN_REPS, int(new_reps))
        self.save()
        return exercise

    def mark_performed(self, exercise_id: str, when):
        exercise = self.by_id(exercise_id)
        if exercise is None:
            return None
        exercise.last_performed_date = when
        self.save()
        return exercise

    def reset_last_performed(self, exercise_type: ExerciseType):
        """Make every exercise of one type eligible again."""
        for exercise in self.of_type(exercise_type):
            exercise.last_performed_date = None
        self.save()

    def add(self, exercise: Exercise):
        if exercise.id in self._exercises:
            return None
        exercise.current_reps = max(MIN_REPS, exercise.current_reps)
        self._exercises[exercise.id] = exercise
        self.save()
        return exercise

    def remove(self, exercise_id: str):
        removed = self._exercises.pop(exercise_id, None)
        if removed is not None:
            self.save()
        return removed

    def reset_to_defaults(self):
        self._exercises = {e.id: e for e in seed()}
        self.save()
