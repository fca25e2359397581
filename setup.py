import setuptools


with open("README.md", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name="biot-savart-segments",
    version="0.0.1",
    description="Closed-form Biot-Savart field of finite straight current segments",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(exclude=["tests"]),
    install_requires=['numpy', 'numba', 'xarray', 'dask'],
    extras_require={'test': ['pytest', 'scipy']},
)
