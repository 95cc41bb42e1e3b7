# monolayer

Support code for a tumour cell monolayer simulation: radiation and
drug dose-response curves, glucose depletion of the medium, colony
size distributions, playback of recorded cell positions, and curves
for time-series and profile plots.

It has no dependencies outside the standard library.

## Installation

    pip install .

## Modules

- `monolayer.radiation`: linear-quadratic survival with an oxygen
  enhancement ratio. `RadiationParams.survival_fraction(dose, c_o2)`
  gives the surviving fraction for one dose. `survival_fraction_curve(radiation, c_o2, maxdose)`
  gives `NPLOT` (100) doses from 0 up to, but not including, `maxdose`,
  with their survival fractions.
- `monolayer.drugkill`: drug kill models 1 to 5. `KillParams` takes its
  values in the units of the parameter screen: `kmet0` per minute, `ko2`
  in uM, `kill_duration` in minutes. `metabolism_rate` and
  `kill_exponent` are per second. `drug_kill_curve` gives the kill
  fraction (`plot="KF"`) or the survival fraction over one hour across
  drug concentrations 0..`maxdose`. `drug_radiation_curve` does the same
  across O2 levels 0..`max_o2`, for a drug combined with a radiation
  dose. Both return `None` when `kills` is false.
  `experiment_kill_constant` gives the Kd that reproduces the kill
  experiment. An unknown kill model raises `ValueError`.
- `monolayer.medium`:
  - `glucose_depletion(ncells, ndays, medium_volume, initial_conc, mm_km, hill_n, consumption)`
    gives days and the medium glucose concentration, which never falls
    below zero.
  - `colony_curve(dist, ddist)` gives bin centres and probabilities, or
    `None` when every probability is zero.
  - `colony_y_range(ymax)` gives the y-axis top.
  - `parse_plot_request(name)` splits names such as `pushButton_radSF_1`
    into the plot type and the cell type.
- `monolayer.cells`: the `CellPos` record. `cells_from_list` unpacks a
  flat list of `N_CELLINFO` (7) ints per cell. `parse_frame` reads one
  frame of `T` lines, ended by an `E` line. `unpack_colour` decodes
  0xRRGGBB ints, and `named_colour` looks up cell-type colour names.
- `monolayer.scene.CellScene`: keeps one `Actor` per cell tag, in step
  with the current cells. An actor holds whether it is active, its
  colour, opacity, position and scale. Call `set_cells` or
  `load_cell_list`, then `process_cells`. `set_opacity` takes a 0..100
  slider position, and `cleanup` empties the scene.
- `monolayer.player.Player`: steps through a recorded position file one
  frame at a time into a `CellScene`, using `next_frame`, `pause`,
  `playon` and `stop`. It can be used as a context manager. With
  `save_image` it records the frame file names (`frame_name`) in
  `saved_frames`.
- `monolayer.snapshot`: the cell location listing that goes with a
  snapshot. It is made with `cell_locations`, `format_locations` and
  `write_locations`.
- `monolayer.plot`: `Plot` holds up to `NCMAX` (8) named `Curve`s.
  - `add_curve` and `remove_curve` attach and detach curves.
  - `redraw` gives a curve new data and a pen colour, and grows the
    y scale to fit the last value (`calc_yscale` = 1.3 × value).
  - A non-zero `fixed_yscale` passed to `redraw` is used as the scale.

## Example

    from monolayer.radiation import RadiationParams, survival_fraction_curve
    from monolayer.drugkill import KillParams, drug_kill_curve

    rad = RadiationParams(alpha_h=0.0738, beta_h=0.00725,
                          oer_alpha=2.5, oer_beta=2.5, km=4.3e-3)
    doses, sf = survival_fraction_curve(rad, 0.18, 50)

    kill = KillParams(kmet0=1.0, c2=0.8, ko2=1.0, n_o2=1.0,
                      kill_o2=0.0, kill_drug=1.0, kill_duration=60.0,
                      kill_fraction=0.9, kd=0.01, kill_model=1)
    concs, kf = drug_kill_curve(kill, 0.18, 2.0, "KF")

    from monolayer.scene import CellScene
    from monolayer.player import Player

    scene = CellScene()
    with Player("cells.pos", scene) as player:
        while player.next_frame():
            print(sum(a.active for a in scene.actors))

## What it does not do

There is no graphical interface, and nothing is drawn. The scene and
the plots only hold state for a display to use, and `Player` records
image file names but writes no images. The package has no model
parameter table, no treatment protocol editor and no simulation
engine. Values such as the radiation and kill parameters are passed in
by the caller.

## Tests

    pip install .[test]
    pytest