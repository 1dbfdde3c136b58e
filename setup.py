from setuptools import setup, find_packages
import codecs
import os

here = os.path.abspath(os.path.dirname(__file__))

with codecs.open(os.path.join(here, "README.md"), encoding="utf-8") as fh:
    long_description = "\n" + fh.read()

VERSION = '0.1.0'
DESCRIPTION = 'Textured triangle meshes from quads'
LONG_DESCRIPTION = 'Builds vertex, normal, uv and triangle index buffers from lists of quads.'

# Setting up
setup(
    name="quadgeo",
    version=VERSION,
    author="rootjatin (Jatin Sharma)",
    author_email="<jatin100198@gmail.com>",
    description=DESCRIPTION,
    long_description_content_type="text/markdown",
    long_description=long_description,
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=['numpy'],
    extras_require={'test': ['pytest']},
    python_requires='>=3.8',
    entry_points={'console_scripts': ['quadgeo=quadgeo.__main__:main']},
    keywords=['python', 'three dimensional', 'mesh', 'quad', 'uv', 'texture', '3d'],
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Intended Audience :: Designers",
        "Programming Language :: Python :: 3",
        "Operating System :: Unix",
        "Operating System :: MacOS :: MacOS X",
        "Operating System :: Microsoft :: Windows",
    ]
)
