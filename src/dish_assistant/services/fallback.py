"""Offline recipe suggestion used when the language model is unavailable."""

from collections.abc import Sequence

UNAVAILABLE_NOTE = (
    "> ⚠️ AI сервіс тимчасово недоступний. Це загальні рекомендації; "
    "спробуйте пізніше, щоб отримати персоналізовані рецепти."
)

_GENERIC_RECIPES = """\
## 1. Свіжий овочевий салат

**Час приготування:** 10 хвилин
**Складність:** легко

1. Вимийте та наріжте овочі з вашого списку.
2. Додайте дрібку солі, перцю та трохи олії або лимонного соку.
3. Перемішайте та подавайте одразу.

## 2. Швидкий стір-фрай

**Час приготування:** 20 хвилин
**Складність:** легко

1. Наріжте інгредієнти однаковими невеликими шматочками.
2. Розігрійте сковороду з олією на сильному вогні.
3. Обсмажуйте спочатку тверді інгредієнти, потім м'якші, постійно помішуючи.
4. Приправте соєвим соусом або спеціями до смаку.

## 3. Простий суп

**Час приготування:** 35 хвилин
**Складність:** середня

1. Обсмажте цибулю або інші ароматні овочі в каструлі.
2. Додайте решту інгредієнтів і залийте водою або бульйоном.
3. Доведіть до кипіння та варіть на повільному вогні 20-25 хвилин.
4. Посоліть, поперчіть і подавайте гарячим.
"""


def render_fallback_suggestion(
    ingredients: Sequence[str], preferences: str = ""
) -> str:
    """Render a deterministic markdown suggestion for the given inputs."""
    lines = [
        "# Ідеї для страв з ваших інгредієнтів",
        "",
        f"**Ваші інгредієнти:** {', '.join(ingredients)}",
    ]
    if preferences.strip():
        lines.append(f"**Ваші побажання:** {preferences}")
    lines.extend(
        [
            "",
            "Ось кілька універсальних рецептів, які можна адаптувати "
            "під продукти, що є у вас вдома:",
            "",
            _GENERIC_RECIPES,
            "---",
            "",
            UNAVAILABLE_NOTE,
        ]
    )
    return "\n".join(lines) + "\n"
