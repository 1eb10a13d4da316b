"""
Formatter Registry — цепочка пользовательских форматтеров

Точка расширения для альтернативных текстовых представлений. Реестр
неизменяемый и передаётся в to_string явно: глобального изменяемого слота
нет, любые потоки могут форматировать одновременно.

Hook — callable (value, format_tag) -> str | None. Hooks опрашиваются по
порядку, первая возвращённая строка используется как есть. Если ни один hook
не ответил, используется plain decimal форма.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Final

if TYPE_CHECKING:
    from normdec.core.domain.normalized_decimal import NormalizedDecimal

FormatHook = Callable[["NormalizedDecimal", "str | None"], "str | None"]

# Тег научной формы (как в format(value, "e"))
SCIENTIFIC_FORMAT_TAG: Final[str] = "e"


def scientific_hook(value: "NormalizedDecimal", format_tag: str | None) -> str | None:
    """Научная форма для тега "e"."""
    if format_tag == SCIENTIFIC_FORMAT_TAG:
        return value.to_scientific_string()
    return None


@dataclass(frozen=True)
class FormatterRegistry:
    """
    Неизменяемая цепочка форматтеров.

    with_hook возвращает новый реестр, в котором добавленный hook
    опрашивается первым (раньше уже установленных).
    """

    hooks: tuple[FormatHook, ...] = ()

    def with_hook(self, hook: FormatHook) -> "FormatterRegistry":
        """
        Новый реестр с hook в начале цепочки.

        Args:
            hook: Callable (value, format_tag) -> str | None

        Returns:
            Новый FormatterRegistry (исходный не изменяется)

        Raises:
            TypeError: Если hook не callable
        """
        if not callable(hook):
            raise TypeError(f"hook must be callable, got {type(hook).__name__}")
        return FormatterRegistry(hooks=(hook,) + self.hooks)

    def render(self, value: "NormalizedDecimal", format_tag: str | None = None) -> str | None:
        """Строка первого ответившего hook либо None."""
        for hook in self.hooks:
            rendered = hook(value, format_tag)
            if rendered is not None:
                return rendered
        return None

    def format(self, value: "NormalizedDecimal", format_tag: str | None = None) -> str:
        rendered = self.render(value, format_tag)
        return value.to_plain_string() if rendered is None else rendered


# Реестр по умолчанию: "e" → научная форма, иначе plain decimal
DEFAULT_FORMATTERS: Final[FormatterRegistry] = FormatterRegistry(hooks=(scientific_hook,))
