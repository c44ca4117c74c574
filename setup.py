from setuptools import setup


setup(
    name='fincalc',
    use_scm_version={
        'fallback_version': '0.1.0',
    },
    description='RPN financial calculator',
    install_requires=[
        'regex',
        'prompt_toolkit',
    ],
    packages=['fincalc', 'fincalc.operations'],
    package_dir={'': 'src'},
    include_package_data=True,
    zip_safe=False,
    python_requires='>=3.8',
    classifiers=[
        "Programming Language :: Python :: 3",
    ],
    setup_requires=[
        'setuptools_scm',
    ],
    extras_require={
        'test': [
            'pytest',
            'pytest-cov',
            'coverage',
            'flake8',
        ],
    },
    entry_points={
        'console_scripts': [
            'fincalc=fincalc.cli:main',
        ],
    },
    license='ISC',
)
