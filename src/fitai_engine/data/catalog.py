"""Read-only exercise catalog."""

from collections.abc import Iterable, Iterator

from ..models.exercises import EquipmentType, ExerciseKind, ExerciseRecord, MuscleGroup
from ..utils.exercise_utils import find_matching_exercise


class ExerciseCatalog:
    """Immutable collection of exercise records, indexed by id.

    The catalog never changes after construction, so a single instance can be
    shared by concurrent routine generations.
    """

    def __init__(self, records: Iterable[ExerciseRecord]):
        self._records: tuple[ExerciseRecord, ...] = tuple(records)
        self._by_id: dict[str, ExerciseRecord] = {}
        for record in self._records:
            if record.id in self._by_id:
                raise ValueError(f"Duplicate exercise id: {record.id}")
            self._by_id[record.id] = record

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[ExerciseRecord]:
        return iter(self._records)

    def __contains__(self, exercise_id: object) -> bool:
        return exercise_id in self._by_id

    def __repr__(self) -> str:
        return f"ExerciseCatalog({len(self)} exercises)"

    @property
    def records(self) -> tuple[ExerciseRecord, ...]:
        return self._records

    def get(self, exercise_id: str) -> ExerciseRecord | None:
        """Get a record by id."""
        return self._by_id.get(exercise_id)

    def filter(
        self,
        muscle_group: MuscleGroup | None = None,
        equipment: EquipmentType | Iterable[EquipmentType] | None = None,
        kind: ExerciseKind | None = None,
        exclude_ids: Iterable[str] = (),
    ) -> list[ExerciseRecord]:
        """Records matching every given criterion, in catalog order.

        ``equipment`` accepts a single type or any collection of allowed types.
        """
        if isinstance(equipment, EquipmentType):
            allowed = {equipment}
        elif equipment is not None:
            allowed = set(equipment)
        else:
            allowed = None
        excluded = set(exclude_ids)

        return [
            record
            for record in self._records
            if (muscle_group is None or record.muscle_group == muscle_group)
            and (allowed is None or record.equipment in allowed)
            and (kind is None or record.kind == kind)
            and record.id not in excluded
        ]

    def by_muscle(self, muscle_group: MuscleGroup) -> list[ExerciseRecord]:
        return self.filter(muscle_group=muscle_group)

    def by_equipment(self, equipment: EquipmentType) -> list[ExerciseRecord]:
        return self.filter(equipment=equipment)

    def compounds(self, muscle_group: MuscleGroup) -> list[ExerciseRecord]:
        return self.filter(muscle_group=muscle_group, kind=ExerciseKind.COMPOUND)

    def isolations(self, muscle_group: MuscleGroup) -> list[ExerciseRecord]:
        return self.filter(muscle_group=muscle_group, kind=ExerciseKind.ISOLATION)

    def core_exercises(self) -> list[ExerciseRecord]:
        return self.filter(muscle_group=MuscleGroup.CORE)

    def find_by_name(self, name: str, threshold: float = 0.8) -> ExerciseRecord | None:
        """Fuzzy lookup by display name (case and accent insensitive)."""
        return find_matching_exercise(name, self._records, threshold=threshold)
