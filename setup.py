from setuptools import setup, find_packages

setup(
    name="yt-transcript",
    version="0.1.0",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "requests>=2.31.0",
        "colorlog>=6.7.0",
        "python-dotenv>=1.0.0",
        "rich>=13.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4.0",
            "pytest-cov>=4.1.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "yt-transcript=yt_transcript.main:main",
        ],
    },
    python_requires=">=3.8",
    description="Fetch YouTube captions as plain or timestamped text",
    author="Venkatesh Murugadas",
)
