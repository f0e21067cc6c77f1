from app.logging.logger import Log
from app.resources.factory import RecordFactory
from app.resources.models import ItemKind, RawSubmission
from app.session.session_log import SessionLog


class Registry:
    """Turns submissions into session log lines.

    Rejections are silent to the caller: ``submit`` only reports whether a
    line was appended.
    """

    def __init__(self, factory: RecordFactory | None = None) -> None:
        self._factory = factory or RecordFactory()

    def submit(self, kind: ItemKind | str, raw: RawSubmission, log: SessionLog) -> bool:
        """Validate, build, and append one resource; False means nothing changed."""
        item_kind = ItemKind.parse(kind)
        if item_kind is None:
            Log.info("Rejected submission with unknown item type", item_type=kind)
            return False

        record = self._factory.create(item_kind, raw)
        if record is None:
            Log.info(
                "Rejected submission",
                kind=item_kind.value,
                failed=self._factory.violations(item_kind, raw),
            )
            return False

        line = record.as_string()
        log.append(line)
        Log.info("Registered resource", kind=item_kind.value, entries=len(log))
        Log.debug(f"Appended: {line}")
        return True
