from setuptools import setup, find_packages

with open("README.rst") as f:
    readme = f.read()

setup(
    name="lasdecode",
    version="0.1.0",
    description="Decoding of ASPRS LAS point cloud files in python",
    long_description=readme,
    python_requires=">=3.6",
    keywords="las lidar point cloud",
    license="BSD 3-Clause",
    packages=find_packages(exclude=("lasdecodetests",)),
    zip_safe=False,
    install_requires=["numpy"],
    extras_require={
        "dev": [
            "pytest",
        ],
    }
)
