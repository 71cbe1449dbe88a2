"""Package build script"""
import re
import setuptools

ver_file = 'VERSION'

# Pull package version number from the VERSION file
with open(ver_file, 'r') as f:
    __version__ = f.read().strip()

if not re.match(r'^\d+\.\d+\.\d+(?:\.[a-zA-Z0-9]+)?$', __version__):
    raise EnvironmentError(f'Could not find valid version number in {ver_file}; aborting setup')

with open("./README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setuptools.setup(
    name="geodistance",
    version=__version__,
    description="Ellipsoidal distance between two latitude/longitude pairs (Andoyer-Lambert).",
    long_description=long_description,
    long_description_content_type='text/markdown',
    packages=setuptools.find_packages(
        include=('geodistance*', ),
        exclude=('*tests', 'tests*')
    ),
    package_data={"geodistance": ["py.typed"]},
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent"
    ],
    python_requires='>=3.8',
    install_requires=[
        'pydantic>=2,<3',
    ],
    extras_require={
        'api': [
            'fastapi>=0.100',
            'uvicorn',
        ],
        'test': [
            'fastapi>=0.100',
            'httpx',
            'numpy',
            'pytest',
        ],
    },
)
