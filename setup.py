from setuptools import setup

setup(
    name='boxborder',
    version='0.1.0',
    description='Immutable box border values with merging and interpolation',
    author='Ziver-opensource',
    package_dir={'': 'src'},
    packages=['boxborder', 'boxborder.cli'],
    include_package_data=True,
    python_requires='>=3.8',
    install_requires=[
        'click>=7.0',
        'rich>=9.0'
    ],
    extras_require={
        'test': ['pytest>=7.0'],
    },
    entry_points={
        'console_scripts': [
            'boxborder = boxborder.cli.main:cli'
        ]
    },
    classifiers=[
        'Programming Language :: Python :: 3',
    ],
)
