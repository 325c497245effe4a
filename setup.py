#!/usr/bin/env python

import timeit
from setuptools import setup, Command

class Speed(Command):
    description = "run speed benchmarks"
    user_options = []
    boolean_options = []
    def initialize_options(self):
        pass
    def finalize_options(self):
        pass
    def run(self):
        def do(setup_statements, statement):
            # extracted from timeit.py
            t = timeit.Timer(stmt=statement,
                             setup="\n".join(setup_statements))
            # determine number so that 0.2 <= total time < 2.0
            for i in range(1, 10):
                number = 10**i
                x = t.timeit(number)
                if x >= 0.2:
                    break
            return x / number

        def abbrev(t):
            if t > 1.0:
                return "%.3fs" % t
            if t > 1e-3:
                return "%.1fms" % (t*1e3)
            return "%.1fus" % (t*1e6)

        for group in [1024]:
            S1 = "from pakdh import PAKDH_A, PAKDH_B"
            S2 = "sB = PAKDH_B('password', 'A', 'B', group=%d)" % group
            S3 = "mB = sB.start()"
            S4 = "sA = PAKDH_A('password', 'A', 'B', group=%d)" % group
            S5 = "mA = sA.start()"
            S6 = "c = sA.finish(mB)"

            full = do([S1, S2, S3], ";".join([S4, S5, S6]))
            start = do([S1], ";".join([S4, S5]))
            # how large is the generated message?
            from pakdh import PAKDH_A
            msglen = len(PAKDH_A("pw", "A", "B", group=group).start())
            print("%-5d: msglen=%3d, full=%6s, start=%6s"
                  % (group, msglen, abbrev(full), abbrev(start)))
cmdclass = {"speed": Speed}

setup(name="pakdh",
      version="0.1.0",
      description="PAK-DH (RFC 5683) password-authenticated key exchange (pure python)",
      url="https://tools.ietf.org/html/rfc5683",
      package_dir={"": "src"},
      packages=["pakdh", "pakdh.parameters", "pakdh.test"],
      license="MIT",
      cmdclass=cmdclass,
      python_requires=">=3.6",
      classifiers=[
          "Intended Audience :: Developers",
          "License :: OSI Approved :: MIT License",
          "Programming Language :: Python",
          "Programming Language :: Python :: 3",
          "Topic :: Security :: Cryptography",
          ],
      install_requires=["hkdf"],
      extras_require={"test": ["pytest"]},
      )
