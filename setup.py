from glob import glob
from setuptools import setup


setup(
    name='devcalc',
    use_scm_version={
        # Source archives and unversioned checkouts
        'fallback_version': '1.0.0',
    },
    description='Developer step by step calculator',
    install_requires=[
        'regex',
        'prompt_toolkit',
    ],
    packages=['devcalc'],
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
    scripts=glob('bin/*'),
    license='ISC',
)
