from setuptools import setup, find_packages

setup(
    name="sharesolve",
    version="1.0",
    description="Secret reconstruction for threshold secret sharing by exact and floating point Gaussian elimination",
    long_description=("Reconstructs the constant term of a polynomial from k shares whose values are written in "
                      "bases 2 to 36, solving the Vandermonde system either in exact rational arithmetic or in "
                      "floating point arithmetic with partial pivoting"),
    long_description_content_type="text/plain",
    license="Apache License 2.0",
    python_requires=">=3.8",
    packages=find_packages(include=["sharesolve", "sharesolve.*"]),
    install_requires=["numpy"],
    extras_require={"test": ["pytest", "sympy"]},
    entry_points={"console_scripts": ["sharesolve=sharesolve.cli:main"]},
    classifiers=[
        "Intended Audience :: Science/Research", "Development Status :: 3 - Alpha", "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10", "Programming Language :: Python :: 3.11", "Programming Language :: Python :: 3.12",
        "Natural Language :: English", "Operating System :: OS Independent", "Topic :: Security :: Cryptography"
    ],
    keywords=["secret sharing", "shamir", "threshold", "gaussian elimination", "interpolation"],
    zip_safe=False,
)
