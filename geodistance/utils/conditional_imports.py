"""
Intercepts import errors concerning optional dependencies to either:
    - Point the user at the extra that provides them or
    - Pip install the extra automatically, if permitted
"""

__all__ = ['ConditionalPackageInterceptor']

from importlib import util
import subprocess
import sys
from typing import Dict, List, Union

from geodistance.utils.logging import LOGGER


class ConditionalPackageInterceptor:
    """
    A sys.meta_path finder consulted after all the regular finders have failed.

    Only packages registered through .permit_packages() are handled; anything else
    falls through to the usual ModuleNotFoundError. For a registered package the
    interceptor either pip installs its distribution (if auto download has been
    enabled) or raises a ModuleNotFoundError naming the extra to install.

    To use, in the package's root __init__.py:

        ConditionalPackageInterceptor.permit_packages({'fastapi': 'geodistance[api]'})
        sys.meta_path.append(ConditionalPackageInterceptor)
    """

    PERMITTED_PACKAGES: Dict[str, str] = {}
    AUTO_DOWNLOAD = False

    @classmethod
    def permit_packages(cls, packages: Union[List[str], Dict[str, str]]) -> None:
        """
        Registers optional packages with the interceptor.

        Import names do not always match distribution names, so packages may be
        given either as a list (installed exactly as named) or as a dict mapping
        the import name to the pip requirement, e.g. {'fastapi': 'geodistance[api]'}.

        Args:
            packages (Union[list, dict]): The packages to register

        Returns:
            None
        """
        if isinstance(packages, list):
            cls.PERMITTED_PACKAGES.update({item: item for item in packages})
        elif isinstance(packages, dict):
            cls.PERMITTED_PACKAGES.update(packages)
        else:
            raise TypeError(
                f"Permitted packages must be submitted as a list or dict, not {type(packages)}"
            )

    @classmethod
    def permit_auto_download(cls, option: bool) -> None:
        """
        Defines whether registered packages may be pip installed on demand. Default False.
        """
        cls.AUTO_DOWNLOAD = option

    @classmethod
    def find_spec(  # pylint: disable=unused-argument, inconsistent-return-statements
            cls, name, path, target=None
    ):
        """
        Called by importlib once every other finder on sys.meta_path has failed to
        locate a module. Not meant to be called directly.

        Args:
            name (str): The fully qualified module name
            path: The parent package's __path__, for submodules
            target: Unused

        Returns:
            A ModuleSpec if the package was installed, otherwise None
        """
        if name not in cls.PERMITTED_PACKAGES:
            return

        requirement = cls.PERMITTED_PACKAGES[name]
        if cls.AUTO_DOWNLOAD:
            LOGGER.warning('Module %r not installed. Attempting to pip install %s', name, requirement)
            try:
                subprocess.run(
                    [sys.executable, '-m', 'pip', 'install', requirement],
                    check=True
                )
            except subprocess.CalledProcessError:
                LOGGER.error('Failed to pip install %s', requirement)
                return None

            return util.find_spec(name)

        raise ModuleNotFoundError(
            f"Module {name!r} is an optional dependency of geodistance. Either: \n\n"
            "1) Install it yourself: \n"
            f"    pip install {requirement} \n\n"
            "2) Allow it to be installed on first use: \n"
            "    from geodistance.utils.conditional_imports import ConditionalPackageInterceptor \n"
            "    ConditionalPackageInterceptor.permit_auto_download(True)"
        )
