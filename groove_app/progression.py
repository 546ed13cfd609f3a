REP_STEP = 2
TIMED_STEP = 5


class ExerciseNotFound(LookupError):
    pass


def progression_step(exercise):
    return TIMED_STEP if exercise.is_timed else REP_STEP


class ProgressionEngine:
    def __init__(self, catalog):
        self.catalog = catalog

    def complete_session(self, exercise_id: str, actual_reps_performed: int, was_easy: bool, now):
        """
        Record a finished snack and apply progression.

        An easy session that hit the target earns +2 reps (or +5 seconds for
        timed holds). Anything else leaves the count alone. Counts never go
        down here.
        """
        exercise = self.catalog.by_id(exercise_id)
        if exercise is None:
            raise ExerciseNotFound(exercise_id)

        if was_easy and actual_reps_performed >= exercise.current_reps:
            exercise.current_reps += progression_step(exercise)

        exercise.last_performed_date = now
        self.catalog.save()
        return exercise

    def mark_as_performed(self, exercise_id: str, now):
        return self.catalog.mark_performed(exercise_id, now)
