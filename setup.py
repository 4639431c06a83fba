from setuptools import setup, find_packages


with open("src/heavybag/version.py") as version_file:
    version = None
    for line in version_file.readlines():
        if "version = " in line:
            version = line.split(" = ")[1].replace("\"", "").strip()
            break
    else:
        print("Cannot determine version")

long_description = ''
try:
    with open("README.rst") as readme_file:
        long_description = readme_file.read()
except Exception:
    pass


required = ["hjson"]


extras = {
    'test': ["pytest"],
}

extras['all'] = list({d for extra in extras.values() for d in extra})


setup(
    name='heavybag',
    version=version,
    packages=find_packages("src"),
    package_dir={"": "src"},
    include_package_data=True,
    package_data={
        "heavybag": ["data/*.hjson"],
    },
    install_requires=required,
    extras_require=extras,
    python_requires=">=3.9",
    zip_safe=False,
    keywords="multiset bag counter collection weighted sampling",
    description="A counting multiset for massively duplicated elements",
    long_description=long_description,
    classifiers=[
        'Development Status :: 5 - Production/Stable',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: Apache Software License',
        'Topic :: Software Development :: Libraries :: Python Modules',
        'Programming Language :: Python :: 3'],
)
