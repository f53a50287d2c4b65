from setuptools import setup, find_packages

setup(
    name="view_switcher",
    version="0.1.0",
    packages=find_packages(include=["switcher_core", "switcher_core.*", "config", "desktop_ui", "desktop_ui.*"]),
    install_requires=[
        "PySide6>=6.7",
        "python-dotenv>=1.0.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    python_requires=">=3.10",
)
