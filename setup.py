from setuptools import find_packages, setup

setup(
    name='monoclass',
    version='0',
    package_dir={'': 'src'},
    packages=find_packages('src'),
    python_requires='>=3.8',
    extras_require={
        'test': ['pytest']
    },
    license='',
    author='monoclass team',
    author_email='',
    description='Minimal single-inheritance object model with delegating member tables.'
)
