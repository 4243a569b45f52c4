"""Print every catalogue scale realised on every common root.

Run from the repository root::

    python examples/spell_scales.py examples/scales.csv --naming german
"""

import argparse
import logging

import scalespeller
import scalespeller.catalogue
import scalespeller.naming

logging.basicConfig(level=logging.INFO)


def main () -> None:

	parser = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
	parser.add_argument("path", nargs="?", default="examples/scales.csv", help="Scale catalogue file")
	parser.add_argument("--naming", default="english", choices=sorted(scalespeller.naming.STYLES), help="Note naming style")
	args = parser.parse_args()

	style = scalespeller.naming.get_style(args.naming)
	catalogue = scalespeller.catalogue.ScaleCatalogue.load(args.path)

	for entry in catalogue.entries:

		print(f"{entry.name} ({entry.scale})")

		for root in scalespeller.catalogue.POSSIBLE_ROOTS:
			realised = scalespeller.RealisedScale(root, entry.scale)
			print(f"  {root.name(style):<10} {realised.render(style)}")


if __name__ == "__main__":
	main()
