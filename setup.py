from setuptools import setup, find_packages

setup(
    name='fib-report',
    version='0.1.0',
    packages=find_packages(where='src'),
    package_dir={'': 'src'},
    install_requires=[
        'PyYAML>=6.0',
    ],
    extras_require={
        'test': [
            'pytest>=7.0',
        ],
    },
    entry_points={
        'console_scripts': [
            'fib-report=fib_report.cli:main',
        ],
    },
    description='Prints the first ten Fibonacci numbers using naive recursion',
    long_description=open('README.md').read(),
    long_description_content_type='text/markdown',
    classifiers=[
        'Programming Language :: Python :: 3',
        'Operating System :: OS Independent',
        'Intended Audience :: Education',
    ],
    keywords='fibonacci recursion example',
    python_requires='>=3.8',
)
