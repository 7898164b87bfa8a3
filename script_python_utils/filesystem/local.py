"""Implémentation locale de la gestion des fichiers.

Ce module fournit LocalFileManager, qui applique la même discipline
à chaque opération : normalisation du chemin, ligne de log, appel à
la primitive (os, shutil, glob, json, tempfile), résultat retourné
sans transformation.

Le répertoire courant n'est jamais modifié au niveau du processus :
cd() change le répertoire de base du gestionnaire, sur lequel sont
ancrés tous les chemins relatifs.

Example:
    Copie d'un artefact de build :

        from script_python_utils import ConsoleLogger
        from script_python_utils.filesystem import LocalFileManager

        files = LocalFileManager(logger=ConsoleLogger())
        files.mkdirp("dist")
        files.cp(["build", "app.js"], "dist")   # -> dist/app.js
        pkg = files.read_json("package.json")
"""

import errno
import glob
import json
import os
import shutil
import stat
import tempfile
from typing import Any, List, Optional, Sequence, Tuple, Union

from script_python_utils.filesystem.base import FileManager
from script_python_utils.filesystem.paths import PathSpec, resolve
from script_python_utils.logging.base import Logger
from script_python_utils.logging.formatter import (
    CallFormatter,
    PlainCallFormatter,
)


class LocalFileManager(FileManager):
    """
    Opérations sur le système de fichiers local.

    Toutes les opérations sont loggées via l'instance Logger, si
    elle est fournie.

    Attributes:
        base_dir: Répertoire de base des chemins relatifs (None pour
            le répertoire courant du processus).
        json_indent: Indentation par défaut de write_json.
    """

    def __init__(
        self,
        logger: Optional[Logger] = None,
        formatter: Optional[CallFormatter] = None,
        base_dir: Optional[str] = None,
        json_indent: Optional[int] = 2,
    ) -> None:
        """
        Initialise le gestionnaire de fichiers.

        Args:
            logger: Instance de Logger pour le logging
            formatter: Formateur des lignes de log
            base_dir: Répertoire de base initial
            json_indent: Indentation par défaut des fichiers JSON
        """
        self._logger = logger
        self._formatter = formatter or PlainCallFormatter()
        self.base_dir = base_dir
        self.json_indent = json_indent

    def _log(self, name: str, *values: Any) -> None:
        if self._logger:
            self._logger.log_info(
                self._formatter.format_operation(name, values)
            )

    def _path(self, filepath: PathSpec) -> str:
        return resolve(filepath, self.base_dir)

    @staticmethod
    def _remove(path: str) -> None:
        """Supprime un fichier, un lien ou une arborescence.

        Un chemin absent n'est pas une erreur.
        """
        try:
            if os.path.isdir(path) and not os.path.islink(path):
                shutil.rmtree(path)
            else:
                os.remove(path)
        except FileNotFoundError:
            return

    def _resolve_destination(self, source: str, destination: str) -> str:
        """Résout la destination d'une copie ou d'un déplacement.

        - répertoire existant : le nom de la source y est ajouté ;
        - fichier existant : il est supprimé avant l'opération, sauf
          s'il s'agit de la source elle-même ;
        - destination absente : conservée telle quelle.

        Args:
            source: Chemin source normalisé.
            destination: Chemin de destination normalisé.

        Returns:
            Destination effective.

        Raises:
            OSError: Toute erreur de stat autre que "introuvable".
        """
        try:
            stats = os.stat(destination)
        except FileNotFoundError:
            return destination

        if stat.S_ISDIR(stats.st_mode):
            name = os.path.basename(os.path.normpath(source))
            return os.path.join(destination, name)
        if stat.S_ISREG(stats.st_mode):
            if os.path.exists(source) and os.path.samefile(
                source, destination
            ):
                return destination
            self._remove(destination)
        return destination

    def read_json(self, filepath: PathSpec) -> Any:
        """
        Lit et décode un fichier JSON.

        Le BOM UTF-8 éventuel est ignoré.

        Args:
            filepath: Chemin ou segments du fichier

        Returns:
            Valeur décodée

        Raises:
            FileNotFoundError: Si le fichier n'existe pas
            json.JSONDecodeError: Si le contenu n'est pas du JSON
        """
        path = self._path(filepath)
        self._log("readJSON", path)
        with open(path, "r", encoding="utf-8-sig") as f:
            return json.load(f)

    def write_json(
        self,
        filepath: PathSpec,
        data: Any,
        indent: Optional[int] = None,
        sort_keys: bool = False,
    ) -> None:
        """
        Encode et écrit un fichier JSON.

        Les répertoires parents sont créés si nécessaire. Le fichier
        se termine par un saut de ligne.

        Args:
            filepath: Chemin ou segments du fichier
            data: Valeur sérialisable en JSON
            indent: Indentation (défaut: json_indent du gestionnaire)
            sort_keys: Trier les clés des objets

        Raises:
            TypeError: Si data n'est pas sérialisable
        """
        path = self._path(filepath)
        self._log("writeJSON", path)
        content = json.dumps(
            data,
            indent=self.json_indent if indent is None else indent,
            sort_keys=sort_keys,
            ensure_ascii=False,
        )
        self._write_text(path, content + "\n", "utf-8")

    def mkdirp(self, *filepaths: PathSpec) -> None:
        """
        Crée chaque répertoire et ses parents.

        Sans effet sur un répertoire existant.

        Args:
            *filepaths: Chemins ou segments des répertoires

        Raises:
            FileExistsError: Si un fichier occupe le chemin
        """
        for filepath in filepaths:
            path = self._path(filepath)
            self._log("mkdirp", path)
            os.makedirs(path, exist_ok=True)

    def globby(
        self,
        patterns: Union[str, Sequence[str]],
        cwd: Optional[PathSpec] = None,
        dot: bool = False,
        only_files: bool = True,
    ) -> List[str]:
        """
        Recherche les chemins correspondant aux motifs.

        Les motifs ne sont pas joints comme des chemins. ``**``
        parcourt les sous-répertoires ; un motif préfixé par ``!``
        exclut ses correspondances du résultat.

        Args:
            patterns: Motif unique ou liste de motifs
            cwd: Répertoire de recherche (défaut: répertoire de base)
            dot: Inclure les entrées cachées
            only_files: Ne retourner que des fichiers

        Returns:
            Chemins triés, relatifs au répertoire de recherche
            (absolus pour les motifs absolus)
        """
        if isinstance(patterns, str):
            patterns = [patterns]
        root = self._path(cwd) if cwd is not None else self.base_dir
        self._log("globby", *patterns)

        included, excluded = self._split_patterns(patterns)
        matches = set()
        for pattern in included:
            matches.update(self._glob(pattern, root, dot))
        for pattern in excluded:
            matches.difference_update(self._glob(pattern, root, dot))

        if only_files:
            matches = {
                m for m in matches
                if os.path.isfile(m if root is None else os.path.join(root, m))
            }
        return sorted(matches)

    @staticmethod
    def _split_patterns(
        patterns: Sequence[str],
    ) -> Tuple[List[str], List[str]]:
        included = [p for p in patterns if not p.startswith("!")]
        excluded = [p[1:] for p in patterns if p.startswith("!")]
        return included, excluded

    @staticmethod
    def _glob(pattern: str, root: Optional[str], dot: bool) -> List[str]:
        return glob.glob(
            pattern, root_dir=root, recursive=True, include_hidden=dot
        )

    @staticmethod
    def _write_text(path: str, content: str, encoding: str) -> None:
        parent = os.path.dirname(path)
        if parent:
            os.makedirs(parent, exist_ok=True)
        with open(path, "w", encoding=encoding) as f:
            f.write(content)

    def write(
        self,
        filepath: PathSpec,
        data: Union[str, bytes],
        encoding: str = "utf-8",
    ) -> None:
        """
        Écrit une chaîne ou des octets dans un fichier.

        Les répertoires parents sont créés si nécessaire.

        Args:
            filepath: Chemin ou segments du fichier
            data: Contenu texte ou binaire
            encoding: Encodage du contenu texte
        """
        path = self._path(filepath)
        self._log("write", path)
        if isinstance(data, (bytes, bytearray)):
            parent = os.path.dirname(path)
            if parent:
                os.makedirs(parent, exist_ok=True)
            with open(path, "wb") as f:
                f.write(data)
        else:
            self._write_text(path, data, encoding)

    def read(
        self, filepath: PathSpec, encoding: Optional[str] = None
    ) -> Union[str, bytes]:
        """
        Lit le contenu d'un fichier.

        Args:
            filepath: Chemin ou segments du fichier
            encoding: Encodage ; None pour les octets bruts

        Returns:
            Contenu décodé, ou octets si encoding est None

        Raises:
            FileNotFoundError: Si le fichier n'existe pas
        """
        path = self._path(filepath)
        self._log("read", path)
        if encoding is None:
            with open(path, "rb") as f:
                return f.read()
        with open(path, "r", encoding=encoding) as f:
            return f.read()

    def cd(self, filepath: PathSpec) -> str:
        """
        Change le répertoire de base des opérations suivantes.

        Le répertoire courant du processus n'est pas modifié.

        Args:
            filepath: Chemin ou segments du répertoire

        Returns:
            Nouveau répertoire de base (absolu)

        Raises:
            FileNotFoundError: Si le répertoire n'existe pas
            NotADirectoryError: Si le chemin n'est pas un répertoire
        """
        path = self._path(filepath)
        self._log("cd", path)
        if not stat.S_ISDIR(os.stat(path).st_mode):
            raise NotADirectoryError(
                errno.ENOTDIR, os.strerror(errno.ENOTDIR), path
            )
        self.base_dir = os.path.abspath(path)
        return self.base_dir

    def ls(self, filepath: PathSpec = ".") -> List[str]:
        """
        Liste les noms des entrées d'un répertoire (non récursif).

        Args:
            filepath: Chemin ou segments du répertoire

        Returns:
            Noms des entrées, triés
        """
        path = self._path(filepath)
        self._log("ls", path)
        return sorted(os.listdir(path))

    def cp(self, source: PathSpec, destination: PathSpec) -> str:
        """
        Copie un fichier ou un répertoire.

        Vers un répertoire existant, la source est copiée dedans ;
        un fichier existant est remplacé.

        Args:
            source: Chemin ou segments de la source
            destination: Chemin ou segments de la destination

        Returns:
            Destination effective

        Raises:
            FileNotFoundError: Si la source n'existe pas
            shutil.SameFileError: Si la destination est la source
            OSError: Si la destination ne peut pas être inspectée
        """
        src = self._path(source)
        dest = self._resolve_destination(src, self._path(destination))
        self._log("cp", src, dest)
        if os.path.isdir(src):
            shutil.copytree(src, dest, dirs_exist_ok=True)
        else:
            shutil.copy2(src, dest)
        return dest

    def rm(self, *filepaths: PathSpec) -> None:
        """
        Supprime récursivement chaque chemin (équivalent de rm -rf).

        Args:
            *filepaths: Chemins ou segments à supprimer
        """
        for filepath in filepaths:
            path = self._path(filepath)
            self._log("rm", path)
            self._remove(path)

    def mv(self, source: PathSpec, destination: PathSpec) -> str:
        """
        Déplace un fichier ou un répertoire.

        Même résolution de destination que cp(). Le déplacement est
        terminé au retour de la méthode. Déplacer un fichier sur
        lui-même le laisse intact.

        Args:
            source: Chemin ou segments de la source
            destination: Chemin ou segments de la destination

        Returns:
            Destination effective

        Raises:
            FileNotFoundError: Si la source n'existe pas
        """
        src = self._path(source)
        dest = self._resolve_destination(src, self._path(destination))
        self._log("mv", src, dest)
        shutil.move(src, dest)
        return dest

    def exists(self, filepath: PathSpec) -> bool:
        """
        Vérifie si un chemin existe.

        Args:
            filepath: Chemin ou segments

        Returns:
            True si le chemin existe, False sinon
        """
        path = self._path(filepath)
        result = os.path.exists(path)
        self._log("exists", path, result)
        return result

    def cwd(self) -> str:
        """Retourne le répertoire de base (ou celui du processus)."""
        current = self.base_dir or os.getcwd()
        self._log("cwd", current)
        return current

    def chmod(self, filepath: PathSpec, mode: int) -> None:
        """
        Change les permissions d'un chemin.

        Args:
            filepath: Chemin ou segments
            mode: Mode numérique (ex: 0o755)
        """
        path = self._path(filepath)
        self._log("chmod", path, oct(mode))
        os.chmod(path, mode)

    def tmp_dir(self, prefix: str = "tmp-") -> str:
        """
        Crée un répertoire temporaire unique.

        Aucun nettoyage automatique : l'appelant le supprime avec
        rm() quand il n'en a plus besoin.

        Args:
            prefix: Préfixe du nom du répertoire

        Returns:
            Chemin absolu du répertoire créé
        """
        path = tempfile.mkdtemp(prefix=prefix)
        self._log("tmpDir", path)
        return path

    def empty_dir(self, filepath: PathSpec) -> None:
        """
        Supprime le contenu d'un répertoire sans le supprimer.

        Le répertoire est créé s'il n'existe pas.

        Args:
            filepath: Chemin ou segments du répertoire
        """
        path = self._path(filepath)
        self._log("emptyDir", path)
        if not os.path.exists(path):
            os.makedirs(path)
            return
        for name in os.listdir(path):
            self._remove(os.path.join(path, name))
