"""Setup script for the in-memory video player."""

from setuptools import setup, find_namespace_packages

setup(
    name="videoplayer",
    version="0.1.0",
    description="In-memory video library with playlists and moderation flags",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["videoplayer*"]),
    package_data={"videoplayer": ["videos.txt"]},
    python_requires=">=3.8",
    install_requires=[
        "python-dotenv>=1.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0,<9",
        ],
    },
    entry_points={
        "console_scripts": [
            "videoplayer=videoplayer.cli:main",
        ]
    },
)
