"""
Setup configuration for docx2md package.
"""

from setuptools import setup

setup(
    name='docx2md',
    packages=['docx2md', 'docx2md.utils',
              'docx2md.parsers', 'docx2md.converters'],
    version='0.1.0',
    description='A python utility to convert DOCX files to markdown, '
                'including tables, headings, lists, links and images.',
    license='MIT',
    keywords=['python', 'docx', 'markdown', 'convert'],
    install_requires=[
        'wcwidth>=0.2.5',
    ],
    extras_require={
        'test': ['pytest>=7.0'],
    },
    entry_points={
        'console_scripts': ['docx2md=docx2md.cli:main'],
    },
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'Topic :: Text Processing :: Markup',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
    ],
    python_requires='>=3.7',
)
