# Write the demo torus and cutting plane to data/demo

from meshslicer.demo import save_demo_files
from meshslicer.path import data_path


def main() -> None:
    paths = save_demo_files(str(data_path("demo")))
    print("Demo files saved:")
    print(f"  mesh:  {paths['mesh']}")
    print(f"  plane: {paths['plane']}")


if __name__ == "__main__":
    main()
