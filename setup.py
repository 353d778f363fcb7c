from setuptools import find_packages, setup

setup(name='sylow',
      version='0.1.0',
      description='Constructive Cauchy and first Sylow theorems for finite groups',
      packages=find_packages(exclude=['tests', 'tests.*']),
      python_requires='>=3.9',
      install_requires=['numpy', 'click'],
      extras_require={'test': ['pytest']},
      entry_points={'console_scripts': ['sylow = sylow.__main__:main']})
