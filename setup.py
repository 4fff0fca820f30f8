from setuptools import setup, find_packages

setup(
    name='plotlang',
    version='0.1.0',
    package_dir={'': 'src'},
    packages=find_packages('src'),
    install_requires=['pyarrow>=6.0', 'Pillow'],  # Sample arrays and image encoding
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': [
            'plot=plot_lang.cli:main'  # Entry point to main function
        ]
    },
    author='PlotLang Team',
    description='A small language for plotting implicit equations to images',
    long_description=open('README.md').read(),
    long_description_content_type='text/markdown',
    license='LGPLv3.0',
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: GNU Lesser General Public License v3 (LGPLv3)',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.8',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
    ],
    python_requires='>=3.8',
)
