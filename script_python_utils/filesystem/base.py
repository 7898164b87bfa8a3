"""Interface abstraite pour la gestion des fichiers."""

from abc import ABC, abstractmethod
from typing import Any, List, Optional, Sequence, Union

from script_python_utils.filesystem.paths import PathSpec


class FileManager(ABC):
    """Interface pour les opérations sur le système de fichiers.

    Chaque opération accepte un chemin unique ou une séquence de
    segments, normalise le chemin, trace l'appel puis délègue à la
    primitive du système. Les erreurs de la primitive remontent
    sans transformation.
    """

    @abstractmethod
    def read_json(self, filepath: PathSpec) -> Any:
        """Lit et décode un fichier JSON."""
        pass

    @abstractmethod
    def write_json(
        self,
        filepath: PathSpec,
        data: Any,
        indent: Optional[int] = None,
        sort_keys: bool = False,
    ) -> None:
        """Encode et écrit un fichier JSON (dossiers parents créés)."""
        pass

    @abstractmethod
    def mkdirp(self, *filepaths: PathSpec) -> None:
        """Crée chaque répertoire et ses parents s'ils manquent."""
        pass

    @abstractmethod
    def globby(
        self,
        patterns: Union[str, Sequence[str]],
        cwd: Optional[PathSpec] = None,
        dot: bool = False,
        only_files: bool = True,
    ) -> List[str]:
        """Retourne les chemins correspondant aux motifs."""
        pass

    @abstractmethod
    def write(
        self,
        filepath: PathSpec,
        data: Union[str, bytes],
        encoding: str = "utf-8",
    ) -> None:
        """Écrit une chaîne ou des octets (dossiers parents créés)."""
        pass

    @abstractmethod
    def read(
        self, filepath: PathSpec, encoding: Optional[str] = None
    ) -> Union[str, bytes]:
        """Lit un fichier (octets bruts si encoding est None)."""
        pass

    @abstractmethod
    def cd(self, filepath: PathSpec) -> str:
        """Change le répertoire de base des opérations suivantes."""
        pass

    @abstractmethod
    def ls(self, filepath: PathSpec = ".") -> List[str]:
        """Liste les noms des entrées d'un répertoire."""
        pass

    @abstractmethod
    def cp(self, source: PathSpec, destination: PathSpec) -> str:
        """Copie un fichier ou un répertoire."""
        pass

    @abstractmethod
    def rm(self, *filepaths: PathSpec) -> None:
        """Supprime récursivement, sans erreur si absent."""
        pass

    @abstractmethod
    def mv(self, source: PathSpec, destination: PathSpec) -> str:
        """Déplace un fichier ou un répertoire."""
        pass

    @abstractmethod
    def exists(self, filepath: PathSpec) -> bool:
        """Indique si le chemin existe."""
        pass

    @abstractmethod
    def cwd(self) -> str:
        """Retourne le répertoire de base courant."""
        pass

    @abstractmethod
    def chmod(self, filepath: PathSpec, mode: int) -> None:
        """Change les permissions d'un chemin."""
        pass

    @abstractmethod
    def tmp_dir(self, prefix: str = "tmp-") -> str:
        """Crée un répertoire temporaire unique."""
        pass

    @abstractmethod
    def empty_dir(self, filepath: PathSpec) -> None:
        """Vide un répertoire sans le supprimer."""
        pass
