"""Step Trace Recorder — наблюдатель за итерациями движка.

Получает по одному StepRecord на итерацию, в порядке итераций, и после
завершения отдаёт неизменяемую последовательность. Состояние движка не
изменяет.
"""

from typing import Iterator, List

from src.core.domain.step_record import StepRecord


class StepTraceRecorder:
    """Append-only накопитель StepRecord.

    Одноразовый: после close() новые записи не принимаются.
    """

    def __init__(self):
        self._records: List[StepRecord] = []
        self._closed = False

    def record(self, step: StepRecord) -> None:
        """Добавить запись очередной итерации.

        Raises:
            RuntimeError: если recorder уже закрыт
            ValueError: если индекс записи нарушает порядок итераций
        """
        if self._closed:
            raise RuntimeError("StepTraceRecorder is closed")
        if step.index != len(self._records):
            raise ValueError(
                f"Out-of-order step: got index {step.index}, expected {len(self._records)}"
            )
        self._records.append(step)

    def close(self) -> None:
        self._closed = True

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def records(self) -> tuple[StepRecord, ...]:
        return tuple(self._records)

    def digits(self) -> str:
        """Конкатенация выбранных цифр d (корень без точки)."""
        return "".join(str(r.d) for r in self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[StepRecord]:
        return iter(tuple(self._records))
