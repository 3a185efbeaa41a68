"""
Journal d'audit d'un run de reconciliation.

Chaque message est ajoute, horodate, au fichier match-subtitles.log du
dossier traite, puis transmis au sink de l'hote (console, zone de texte
ou rien). Le fichier est ouvert en ajout pour chaque ligne et n'est jamais
tronque : les runs successifs accumulent l'historique, et un arret brutal
laisse les lignes precedentes intactes.
"""

from datetime import datetime
from pathlib import Path
from typing import Optional

from loguru import logger

from submatch.core.ports.interaction import LogSink, null_sink

# Format de l'horodatage en tete de ligne (heure locale)
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


class AuditLogger:
    """
    Journal d'audit append-only lie a un dossier.

    Cree une fois par run et transmis a chaque etape.

    Utilisation:
        audit = AuditLogger(Path("/tv/Show/match-subtitles.log"), sink=print)
        audit.info("Correct name: Show.S01E01.srt")
    """

    def __init__(self, log_file: Path, sink: Optional[LogSink] = None) -> None:
        """
        Initialise le journal.

        Args:
            log_file: Fichier journal (cree a la premiere ecriture)
            sink: Destination supplementaire des messages (optionnel)
        """
        self._log_file = log_file
        self._sink = sink or null_sink
        self.lines_written = 0

    @property
    def log_file(self) -> Path:
        """Chemin du fichier journal."""
        return self._log_file

    def info(self, message: str) -> None:
        """Consigne un evenement normal."""
        self._write("INFO", message)

    def warning(self, message: str) -> None:
        """Consigne un evenement inattendu mais sans consequence."""
        self._write("WARNING", message)

    def error(self, message: str) -> None:
        """Consigne un echec d'operation."""
        self._write("ERROR", message)

    def _write(self, level: str, message: str) -> None:
        line = f"[{datetime.now().strftime(TIMESTAMP_FORMAT)}] {message}\n"
        try:
            with open(self._log_file, "a", encoding="utf-8") as f:
                f.write(line)
            self.lines_written += 1
        except OSError as e:
            logger.error(f"Ecriture impossible dans le journal {self._log_file}: {e}")

        logger.log(level, message)
        self._sink(message)
