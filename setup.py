from setuptools import setup, find_packages

setup(
    name="taskboard",
    version="0.1.0",
    description="Taskboard -- single-user local task list served as HTML",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={
        "taskboard_center": ["templates/*.html", "static/*.css"],
    },
    python_requires=">=3.9",
    install_requires=[
        "flask>=3.0",
        "markupsafe>=2.1",
    ],
    extras_require={
        "dev": ["pytest", "pytest-cov"],
    },
    entry_points={
        "console_scripts": [
            "taskboard=taskboard_center.app:main",
        ],
    },
)
