# setup.py
from setuptools import setup, find_packages

setup(
    name='ocgui',
    version='0.1.0',
    description='A typed Python facade over the remi GUI toolkit.',
    long_description=open('README.md').read(),
    long_description_content_type='text/markdown',

    packages=find_packages(include=['ocgui', 'ocgui.*', 'ocgui_cli', 'ocgui_cli.*']),

    # Ship the project template used by `ocgui create-project`.
    include_package_data=True,
    package_data={
        'ocgui_cli': [
            'project_template/*.yaml',
            'project_template/lib/*.py',
            'project_template/res/.gitkeep',
        ],
    },

    install_requires=[
        'remi',
        'PyYAML',
        'typer',
    ],
    extras_require={
        'desktop': ['PySide6'],
    },

    entry_points={
        'console_scripts': [
            'ocgui = ocgui_cli.main:app',
        ],
    },

    classifiers=[
        'Programming Language :: Python :: 3',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
        'Intended Audience :: Developers',
        'Topic :: Software Development :: User Interfaces',
    ],
    python_requires='>=3.10',
)
