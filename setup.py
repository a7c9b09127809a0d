# setup.py
from setuptools import setup, find_packages

setup(
    name="qtree",
    version="0.0.1",
    description="Lista recursivamente un directorio y lo muestra como texto, JSON o XML",
    author="Enrique Paredes",
    author_email="eparedesbalen@gmail.com",
    package_dir={"": "src"},
    packages=find_packages(where="src"),  # Encuentra automáticamente la carpeta 'qtree'
    python_requires=">=3.9",
    install_requires=[],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        'console_scripts': [
            'qtree=qtree.main:main',  # Ejecuta el listado desde la terminal
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
