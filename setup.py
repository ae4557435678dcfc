from setuptools import setup, find_packages

setup(name='rrt_planning',
      version='0.1',
      description='Dual tree RRT-Connect motion planning over user supplied free space predicates and samplers.',
      license='Apache-2.0',
      package_dir={'': 'src'},
      packages=find_packages(where='src'),
      python_requires='>=3.8',
      install_requires=["numpy>=1.19", "scikit-learn>=0.23", "python-igraph>=0.8"],
      extras_require={
          'test': ["pytest"],
          'examples': ["matplotlib"],
      },
      include_package_data=True)
