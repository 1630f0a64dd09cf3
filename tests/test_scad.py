from trackforge.csg import box, cylinder, difference, hull, rotate, translate
from trackforge.models.wood_cutout import build_wood_cutout
from trackforge.scad import to_scad


def test_primitives_and_transforms():
    tree = difference(
        box((10, 10, 2)),
        translate(rotate(cylinder(3, radius=1.5), (90, 0, 0)), (5, 5, -0.5)),
    )
    assert to_scad(tree, sections=32) == (
        "difference() {\n"
        "    cube([10, 10, 2]);\n"
        "    translate([5, 5, -0.5]) {\n"
        "        rotate([90, 0, 0]) {\n"
        "            cylinder(h=3, r=1.5, $fn=32);\n"
        "        }\n"
        "    }\n"
        "}\n"
    )


def test_frustum_and_hull():
    out = to_scad(hull(cylinder(1, radius1=2, radius2=1)), sections=16)
    assert "hull() {" in out
    assert "cylinder(h=1, r1=2, r2=1, $fn=16);" in out


def test_cutout_renders():
    out = to_scad(build_wood_cutout())
    assert out.startswith("union() {")
    assert out.count("hull()") == 2
    assert "$fn=64" in out


def test_nested_blocks_are_balanced():
    from trackforge.models.wood_straight import build_wood_straight

    out = to_scad(build_wood_straight(60.0, solid=False), sections=24)
    assert out.count("{") == out.count("}")
    assert out.startswith("difference() {")
    assert all(line.startswith(" ") or line in ("difference() {", "}") for line in out.splitlines())
