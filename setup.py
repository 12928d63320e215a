from setuptools import setup, find_packages

setup(
    name='csvcharts',
    version='1.0.0',
    description='Overlaid line charts of engine data logger CSV files, grouped by column name.',
    author='Your Name',
    packages=find_packages(exclude=['tests', 'tests.*']),
    py_modules=['main'],
    install_requires=[
        'distinctipy>=1.3.4',
        'numpy>=2.2.4',
        'pandas>=2.2.3',
        'pyqtgraph>=0.13.7',
        'PySide6>=6.9.0',
    ],
    extras_require={
        'test': [
            'pytest>=8.0',
        ]
    },
    entry_points={
        'gui_scripts': [
            'csvcharts = main:main'
        ]
    },
    include_package_data=True,
    zip_safe=False
)
