from setuptools import setup, find_packages

setup(
    name='peirsToolbox',
    version='0.1.0',
    packages=find_packages(exclude=['tests', 'tests.*']),
    description='Scoring and descriptive summaries for the Patients Engaged in Research Scale (PEIRS).',
    author='Chi Chang, Sara Santarossa',
    license='MIT',
    install_requires=[
        'numpy',
        'pandas>=1.5',
    ],
    extras_require={
        'test': ['pytest'],
    },
    classifiers=[
        'Programming Language :: Python :: 3',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
    ],
    python_requires='>=3.8',
)
