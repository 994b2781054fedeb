# ------------------------------------------------------------------------------
# Name:          setup.py
# Purpose:       install humcore21 package
#
# Authors:       Greg Chapman
#
# Copyright:     (c) 2021-2025 Greg Chapman
# License:       MIT, see LICENSE
# ------------------------------------------------------------------------------

import setuptools

# must be kept up to date with humcore21/shared/sharedconstants.py:_HUMCORE21_VERSION et al
humcore21version = '1.0.0'

if __name__ == '__main__':
    setuptools.setup(
        name='humcore21',
        version=humcore21version,

        description='A music21-based Humdrum token graph (spines, strands, null resolution) and pitch/interval transposition engine',
        long_description=open('README.md').read(),
        long_description_content_type='text/markdown',

        author='Greg Chapman',
        author_email='gregc@mac.com',

        classifiers=[
            'Development Status :: 4 - Beta',
            'License :: OSI Approved :: MIT License',
            'Programming Language :: Python :: 3 :: Only',
            'Operating System :: OS Independent',
            'Natural Language :: English',
        ],

        keywords=[
            'music',
            'score',
            'notation',
            'humdrum',
            'kern',
            'krn',
            'spine',
            'pitch',
            'interval',
            'transposition',
            'base40',
            'music21',
        ],

        packages=setuptools.find_packages(include=['humcore21', 'humcore21.*']),

        python_requires='>=3.10',

        install_requires=[
            'music21>=9.1',
        ],

        extras_require={
            'test': [
                'pytest',
            ],
        },
    )
