"""Interactive profile questionnaire."""

import questionary
from questionary import Style

# Custom style for questionnaire
custom_style = Style(
    [
        ("qmark", "fg:#673ab7 bold"),
        ("question", "bold"),
        ("answer", "fg:#f44336 bold"),
        ("pointer", "fg:#673ab7 bold"),
        ("highlighted", "fg:#673ab7 bold"),
        ("selected", "fg:#cc5454"),
        ("separator", "fg:#cc5454"),
        ("instruction", ""),
        ("text", ""),
    ]
)

BENCHMARK_QUESTIONS = [
    ("benchmarkBenchPress", "Press banca (kg, 1 rep máxima):"),
    ("benchmarkShoulderPress", "Press militar (kg):"),
    ("benchmarkDeadlift", "Peso muerto (kg):"),
    ("benchmarkSquat", "Sentadilla (kg):"),
    ("benchmarkPullups", "Dominadas (repeticiones):"),
]


class ProfileQuestionnaire:
    """Collects a raw profile, in the same shape the mobile app stores."""

    async def collect_profile(self) -> dict:
        """Run the questionnaire and return the raw profile."""
        print("\n=== Perfil de entrenamiento ===\n")

        name = await questionary.text(
            "¿Cómo te llamas?",
            style=custom_style,
        ).ask_async()

        experience = await questionary.select(
            "¿Cuánta experiencia tienes entrenando?",
            choices=[
                "Principiante (menos de 1 año)",
                "Intermedio (3-5 años)",
                "Avanzado (5+ años)",
            ],
            style=custom_style,
        ).ask_async()

        goals = await questionary.checkbox(
            "¿Cuáles son tus objetivos? (elige todos los que apliquen)",
            choices=[
                questionary.Choice("Ganar músculo", "Hipertrofia"),
                questionary.Choice("Ganar fuerza", "Fuerza"),
                questionary.Choice("Perder grasa / definir", "Definición"),
                questionary.Choice("Mejorar resistencia", "Resistencia"),
            ],
            style=custom_style,
        ).ask_async()

        frequency = await questionary.select(
            "¿Cuántos días por semana puedes entrenar?",
            choices=["2-3 días", "4 días", "5 días", "6 días"],
            style=custom_style,
        ).ask_async()

        location = await questionary.select(
            "¿Dónde entrenas?",
            choices=[
                questionary.Choice("Gimnasio completo", "Gimnasio"),
                questionary.Choice("En casa (mancuernas y barra)", "Casa"),
                questionary.Choice("Equipo mínimo (mancuernas)", "Mínimo"),
                questionary.Choice("Sin equipo (peso corporal)", "Peso corporal"),
            ],
            style=custom_style,
        ).ask_async()

        injuries = await questionary.text(
            "¿Tienes alguna lesión? (ej: hombro, rodilla; deja vacío si ninguna)",
            default="",
            style=custom_style,
        ).ask_async()

        profile = {
            "displayName": name or "",
            "experienceYears": experience,
            "primaryGoal": goals or [],
            "trainingFrequency": frequency,
            "trainingLocation": location,
            "injuries": injuries or "Ninguna",
        }

        add_benchmarks = await questionary.confirm(
            "¿Quieres indicar tus marcas actuales? (opcional, mejora los pesos sugeridos)",
            default=False,
            style=custom_style,
        ).ask_async()

        if add_benchmarks:
            for key, question in BENCHMARK_QUESTIONS:
                answer = await questionary.text(question, style=custom_style).ask_async()
                if answer and answer.strip():
                    profile[key] = answer.strip()

        return profile
