"""Exercise catalog browsing command."""

import click

from ..data import get_default_catalog
from ..models.exercises import EQUIPMENT_LABELS, MUSCLE_GROUP_LABELS, EquipmentType, MuscleGroup
from .base import echo_info, format_table


@click.command()
@click.option("--muscle", type=click.Choice([m.value for m in MuscleGroup]), help="Filter by muscle group")
@click.option("--equipment", type=click.Choice([e.value for e in EquipmentType]), help="Filter by equipment")
@click.option("--curated", is_flag=True, help="Only coach-curated exercises")
def catalog(muscle: str | None, equipment: str | None, curated: bool):
    """Browse the exercise catalog."""
    records = get_default_catalog().filter(
        muscle_group=MuscleGroup(muscle) if muscle else None,
        equipment=EquipmentType(equipment) if equipment else None,
    )
    if curated:
        records = [r for r in records if r.curated]

    if not records:
        echo_info("No exercises match those filters")
        return

    headers = ["ID", "Name", "Muscle", "Equipment", "Sets x Reps"]
    rows = [
        [
            record.id,
            record.name + (" *" if record.curated else ""),
            MUSCLE_GROUP_LABELS[record.muscle_group],
            EQUIPMENT_LABELS[record.equipment],
            f"{record.default_sets} x {record.default_reps}",
        ]
        for record in records
    ]

    click.echo(format_table(headers, rows))
    click.echo()
    click.echo(f"Total: {len(records)} exercise(s)  (* = coach curated)")
