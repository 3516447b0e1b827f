from setuptools import setup, find_packages

# Find all packages in the current directory
packages = find_packages(include=['testdb_python', 'testdb_python.*'])

setup(
    name='testdb-python',
    version='0.1.0',
    description='A stub DB-API driver that answers registered SQL queries with canned rows or errors',
    packages=packages,
    # Requires >= Python 3.10
    python_requires='>=3.10',
    extras_require={
        'test': ['pytest'],
    },
    classifiers=[
        'Programming Language :: Python :: 3',
        'Topic :: Software Development :: Testing :: Mocking',
    ],
    zip_safe=False,
)
