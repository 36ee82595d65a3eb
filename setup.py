import io
from setuptools import setup, find_packages


def read_file(filename, **kwargs):
    encoding = kwargs.get("encoding", "utf-8")

    with io.open(filename, encoding=encoding) as f:
        return f.read()

with open("chromorder/version.py", "r") as f:
    exec(f.read())

setup(
    name="chromorder",
    version=__version__,
    packages=find_packages(exclude=["tests", "tests.*"]),

    # Metadata for PyPi
    author="The chromorder Authors",
    description="Reorder chromosomes to reduce crossing links in circular "
                "genome plots",
    long_description=read_file("README.rst"),
    license="GPLv2",
    classifiers=[
        "Intended Audience :: Science/Research",

        "License :: OSI Approved :: GNU General Public License v2 (GPLv2)",

        "Operating System :: POSIX :: Linux",
        "Operating System :: Microsoft :: Windows",
        "Operating System :: MacOS",

        "Programming Language :: Python :: 3",

        "Topic :: Scientific/Engineering :: Bio-Informatics",
        "Topic :: Scientific/Engineering :: Visualization",
    ],
    keywords="circos chromosome ordering simulated annealing links",

    # Requirements
    python_requires=">=3.6",
    install_requires=["numpy>1.6", "sentinel"],
    extras_require={
        "test": ["pytest", "mock"],
    },

    # Scripts
    entry_points={
        "console_scripts": [
            "chromorder = chromorder.scripts.orderchr:main",
        ],
    }
)
