"""
Adaptateur d'extraction des archives .zip et .rar.

- .zip : module standard zipfile
- .rar : executable 7-Zip externe (7z/7za), localise via la configuration
  ou le PATH

Les entrees sont extraites avec leur chemin relatif et ecrasent les
fichiers existants, comme le ferait une decompression manuelle.
"""

import shutil
import subprocess
import zipfile
from pathlib import Path
from typing import Optional

from loguru import logger

from submatch.core.errors import ArchiveError
from submatch.core.ports.archive import IArchiveExtractor

# Executables 7-Zip essayes dans l'ordre si aucun chemin n'est configure
SEVEN_ZIP_CANDIDATES = ("7z", "7za", "7zz")

# Delai maximal d'une extraction 7-Zip (secondes)
SEVEN_ZIP_TIMEOUT = 600


class ArchiveExtractor(IArchiveExtractor):
    """
    Implementation de IArchiveExtractor pour les archives zip et rar.

    Utilisation:
        extractor = ArchiveExtractor(seven_zip_path=None)
        files = extractor.extract(Path("/tv/Show.zip"), Path("/tv"))
    """

    def __init__(self, seven_zip_path: Optional[str] = None) -> None:
        """
        Initialise l'extracteur.

        Args:
            seven_zip_path: Chemin explicite de l'executable 7-Zip (optionnel)
        """
        self._seven_zip_path = seven_zip_path

    def can_extract(self, archive: Path) -> bool:
        """Verifie si le format de l'archive est pris en charge."""
        return archive.suffix.lower() in (".zip", ".rar")

    def extract(self, archive: Path, destination: Path) -> list[Path]:
        """Extrait l'archive dans destination et retourne les fichiers ecrits."""
        suffix = archive.suffix.lower()
        if suffix == ".zip":
            return self._extract_zip(archive, destination)
        if suffix == ".rar":
            return self._extract_with_seven_zip(archive, destination)
        raise ArchiveError(archive, f"format non supporte ({suffix})")

    def _extract_zip(self, archive: Path, destination: Path) -> list[Path]:
        """Extrait une archive zip avec le module zipfile."""
        extracted: list[Path] = []
        try:
            with zipfile.ZipFile(archive) as zf:
                for member in zf.infolist():
                    if member.is_dir():
                        continue
                    # zipfile neutralise les chemins absolus et les segments ".."
                    extracted.append(Path(zf.extract(member, destination)))
        except (zipfile.BadZipFile, OSError) as e:
            raise ArchiveError(archive, str(e)) from e

        logger.debug(f"Archive zip extraite: {archive} ({len(extracted)} fichiers)")
        return extracted

    def _extract_with_seven_zip(self, archive: Path, destination: Path) -> list[Path]:
        """Extrait une archive via l'executable 7-Zip."""
        executable = self._find_seven_zip()
        if executable is None:
            raise ArchiveError(archive, "7-Zip introuvable (7z, 7za)")

        members = self._list_members(executable, archive)
        try:
            result = subprocess.run(
                [executable, "x", f"-o{destination}", str(archive), "-y"],
                capture_output=True,
                text=True,
                timeout=SEVEN_ZIP_TIMEOUT,
            )
        except (OSError, subprocess.TimeoutExpired) as e:
            raise ArchiveError(archive, str(e)) from e

        if result.returncode != 0:
            message = (result.stderr or result.stdout).strip().splitlines()
            raise ArchiveError(
                archive,
                message[-1] if message else f"code retour {result.returncode}",
            )

        logger.debug(f"Archive extraite via 7-Zip: {archive} ({len(members)} fichiers)")
        return [destination / member for member in members]

    def _list_members(self, executable: str, archive: Path) -> list[str]:
        """
        Liste les fichiers d'une archive via `7z l -slt`.

        Le format technique produit un bloc par entree avec des lignes
        "Path = ..." et "Folder = +/-".
        """
        try:
            result = subprocess.run(
                [executable, "l", "-slt", "-ba", str(archive)],
                capture_output=True,
                text=True,
                timeout=SEVEN_ZIP_TIMEOUT,
            )
        except (OSError, subprocess.TimeoutExpired) as e:
            raise ArchiveError(archive, str(e)) from e

        if result.returncode != 0:
            raise ArchiveError(archive, f"listage impossible (code {result.returncode})")

        members: list[str] = []
        current: Optional[str] = None
        for line in result.stdout.splitlines():
            if line.startswith("Path = "):
                current = line[len("Path = "):]
                members.append(current)
            elif line.startswith("Folder = +") and current is not None:
                members.pop()
                current = None
        return members

    def _find_seven_zip(self) -> Optional[str]:
        """Localise l'executable 7-Zip (configuration puis PATH)."""
        if self._seven_zip_path:
            if Path(self._seven_zip_path).exists():
                return self._seven_zip_path
            return shutil.which(self._seven_zip_path)

        for candidate in SEVEN_ZIP_CANDIDATES:
            found = shutil.which(candidate)
            if found:
                return found
        return None
