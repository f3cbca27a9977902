from setuptools import setup

setup(
    name='esh-scanner',
    version='0.1.0',
    description='Lexical scanner for the esh scripting language',
    author='esh contributors',
    package_dir={'': 'src'},
    packages=['esh', 'esh.cli'],
    include_package_data=True,
    python_requires='>=3.8',
    install_requires=[
        'click>=7.0',
        'rich>=10.0',
        'regex>=2022.1.18'
    ],
    extras_require={
        'test': [
            'pytest>=7.0',
        ],
    },
    entry_points={
        'console_scripts': [
            'esh = esh.cli.main:cli'
        ]
    },
    classifiers=[
        'Programming Language :: Python :: 3',
    ],
)
