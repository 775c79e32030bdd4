from setuptools import find_packages, setup

package_name = "kinorrt"


def read_requirements():
    with open("requirements.txt", "r") as file:
        return [
            line.strip() for line in file if line.strip() and not line.startswith("#")
        ]


setup(
    name=package_name,
    version="0.1.0",
    packages=find_packages(
        exclude=["tests", "tests.*", "examples", "examples.*"]
    ),  # Exclude tests and subpackages
    install_requires=read_requirements(),
    python_requires=">=3.10",
    zip_safe=True,
    description="A goal-biased RRT planner for kinematically-constrained agents on a bounded plane",
    license="MIT",
    tests_require=["pytest"],
    extras_require={"test": ["pytest"]},
    entry_points={
        "console_scripts": ["kinorrt = kinorrt.main:app"],
    },
)
