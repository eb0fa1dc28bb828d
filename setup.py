from setuptools import setup, find_packages
import os

# Helper function to read the README file.
def read(fname):
    with open(os.path.join(os.path.dirname(__file__), fname), encoding='utf-8') as f:
        return f.read()

setup(
    name='mactool',
    version='1.2.0',
    description='Extract, reformat and look up vendors of MAC addresses found in free-form text',
    long_description=read('README.md'),
    long_description_content_type='text/markdown',
    license='GPL-2.0',
    packages=find_packages(where='src'),
    package_dir={'': 'src'},
    include_package_data=True,
    install_requires=[
        'requests',
    ],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': [
            'mactool=mactool.main:main',
        ],
    },
    data_files=[
        ('share/mactool', ['config/mactool.conf']),
    ],
    classifiers=[
        'Programming Language :: Python :: 3',
        'Environment :: Console',
        'Topic :: System :: Networking',
        'Operating System :: OS Independent',
    ],
    python_requires='>=3.7',
)
