# setup.py
from setuptools import setup, find_packages

setup(
    name="upi-insights",
    version="0.1.0",
    description="Track personal expenses by month and category, with bar and pie charts",
    packages=find_packages(include=["upi_insights", "upi_insights.*", "webapp"]),
    package_data={"webapp": ["templates/*.html"]},
    python_requires=">=3.10",
    install_requires=[
        "click>=7.0",
        "pyyaml>=5.3",
        "python-dotenv>=0.19",
        "xlsxwriter>=3.0",
        "fastapi>=0.110",
        "jinja2>=3.0",
        "python-multipart>=0.0.6",
        "uvicorn>=0.20",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
            "openpyxl>=3.0",
            "httpx>=0.24",
        ],
    },
    entry_points={
        "console_scripts": [
            "upi-insights=upi_insights.cli:main",
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
