from setuptools import setup, find_packages

setup(
    name="threadrand",
    version="0.1.0",
    description="Thread-local random number generation without passing a generator around",
    author="fundthmcalculus",
    package_dir={"": "src"},
    packages=find_packages("src"),
    install_requires=["numpy", "joblib", "tqdm"],
    extras_require={"test": ["pytest", "scipy"]},
    python_requires=">=3.9",
    url="https://github.com/fundthmcalculus/threadrand",
    license="MIT",
)
