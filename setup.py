from setuptools import setup, find_packages

setup(
    name="latency-probe",
    version="0.1.0",
    description="Time repeated HTTP requests, chart them live and summarize the latencies",
    author="adamfilli",
    packages=find_packages(include=["latencyprobe", "latencyprobe.*"]),
    install_requires=[
        "httpx",
        "matplotlib",
        "pandas",
    ],
    extras_require={
        "test": ["numpy", "pytest"],
    },
    entry_points={
        "console_scripts": [
            "latencyprobe=latencyprobe.cli:main",
        ],
    },
    include_package_data=True,
    python_requires=">=3.11",
)
