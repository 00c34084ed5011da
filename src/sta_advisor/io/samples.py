"""Built-in example timing path reports."""

SYNOPSYS_SAMPLE = """\
Startpoint: core/register_file/register_memory_reg[5][31] (rising edge-triggered flip-flop clocked by CLK)
Endpoint: core/alu/result_reg[31] (rising edge-triggered flip-flop clocked by CLK)
Path Group: CLK
Path Type: max

Point                                    Incr       Path
---------------------------------------------------------------
clock CLK (rise edge)                   0.000      0.000
clock network delay (propagated)        0.387      0.387
core/register_file/register_memory_reg[5][31]/CLK (DFFARX1_RVT)
                                        0.000      0.387 r
core/register_file/register_memory_reg[5][31]/Q (DFFARX1_RVT)
                                        0.212      0.599 f
core/register_file/U4562/Y (NAND3X0_RVT)
                                        0.095      0.694 r
core/register_file/U3211/Y (INVX0_RVT) 0.087      0.781 f
core/alu/U267/Y (AO22X1_RVT)           0.132      0.913 f
core/alu/U1045/Y (NAND2X0_RVT)         0.068      0.981 r
core/alu/U2456/Y (AND2X1_RVT)          0.104      1.085 r
core/alu/U3789/Y (OA21X1_RVT)          0.116      1.201 r
core/alu/U4201/Y (NAND2X0_RVT)         0.068      1.269 f
core/alu/result_reg[31]/D (DFFARX1_RVT)
                                        0.000      1.269 f
data arrival time                                  1.269

clock CLK (rise edge)                   1.200      1.200
clock network delay (propagated)        0.387      1.587
clock uncertainty                      -0.050      1.537
core/alu/result_reg[31]/CLK (DFFARX1_RVT)
                                        0.000      1.537 r
library setup time                     -0.138      1.399
data required time                                 1.399
---------------------------------------------------------------
data required time                                 1.399
data arrival time                                 -1.269
---------------------------------------------------------------
slack (MET)                                        0.130"""

CADENCE_SAMPLE = """\
Path 1: VIOLATED Setup Check with Pin core/alu/result_reg[15]/D
Endpoint:   core/alu/result_reg[15]/D (^) checked with leading edge of 'CLK'
Beginpoint: core/register_file/register_memory_reg[3][15]/Q (^) triggered by leading edge of 'CLK'
Path Group: CLK
Path Type: max

Delay      Time   Description
------------------------------------------------------------------------------------
0.000      0.000  clock CLK (rise edge)
0.412      0.412  clock network delay (ideal)
0.000      0.412  core/register_file/register_memory_reg[3][15]/CLK (DFFX1_RVT)
0.187      0.599  core/register_file/register_memory_reg[3][15]/Q (DFFX1_RVT)
0.104      0.703  core/register_file/U2134/Y (INVX1_RVT)
0.132      0.835  core/register_file/U3567/Y (NAND2X0_RVT)
0.095      0.930  core/alu/U456/Y (AOI22X1_RVT)
0.112      1.042  core/alu/U789/Y (OAI21X1_RVT)
0.087      1.129  core/alu/U1023/Y (INVX2_RVT)
0.143      1.272  core/alu/U1567/Y (AO22X1_RVT)
0.000      1.272  core/alu/result_reg[15]/D (DFFX1_RVT)
1.272      1.272  data arrival time

1.200      1.200  clock CLK (rise edge)
0.412      1.612  clock network delay (ideal)
-0.050     1.562  clock uncertainty
-0.135     1.427  library setup time
1.427      1.427  data required time
------------------------------------------------------------------------------------
1.427      1.427  data required time
-1.272     -1.272 data arrival time
------------------------------------------------------------------------------------
0.155      0.155  slack (MET)"""

MOCK_REPORT = """\
# SAMPLE DATA: the report server could not be reached, showing a built-in example path
Path 1: VIOLATED Setup Check with Pin core/memory_controller/addr_reg[12]/D
Endpoint:   core/memory_controller/addr_reg[12]/D (^) checked with leading edge of 'CLK'
Beginpoint: core/register_file/register_memory_reg[7][12]/Q (^) triggered by leading edge of 'CLK'
Path Group: CLK
Path Type: max

Delay      Time   Description
------------------------------------------------------------------------------------
0.000      0.000  clock CLK (rise edge)
0.412      0.412  clock network delay (ideal)
0.000      0.412  core/register_file/register_memory_reg[7][12]/CLK (DFFX1_RVT)
0.187      0.599  core/register_file/register_memory_reg[7][12]/Q (DFFX1_RVT)
0.104      0.703  core/register_file/U2134/Y (INVX0_RVT)
0.132      0.835  core/register_file/U3567/Y (NAND2X0_RVT)
0.095      0.930  core/memory_controller/U456/Y (AOI22X1_RVT)
0.112      1.042  core/memory_controller/U789/Y (OAI21X1_RVT)
0.087      1.129  core/memory_controller/U1023/Y (INVX0_RVT)
0.143      1.272  core/memory_controller/U1567/Y (AO22X1_RVT)
0.000      1.272  core/memory_controller/addr_reg[12]/D (DFFX1_RVT)
1.272      1.272  data arrival time

1.000      1.000  clock CLK (rise edge)
0.412      1.412  clock network delay (ideal)
-0.050     1.362  clock uncertainty
-0.135     1.227  library setup time
1.227      1.227  data required time
------------------------------------------------------------------------------------
1.227      1.227  data required time
-1.272     -1.272 data arrival time
------------------------------------------------------------------------------------
-0.045     -0.045 slack (VIOLATED)"""

SAMPLE_REPORTS: dict[str, str] = {
    "synopsys": SYNOPSYS_SAMPLE,
    "cadence": CADENCE_SAMPLE,
}


def get_sample(name: str) -> str:
    """Return the built-in sample report called *name*.

    Raises
    ------
    KeyError
        If no sample with that name exists.
    """
    try:
        return SAMPLE_REPORTS[name.lower()]
    except KeyError:
        available = ", ".join(sorted(SAMPLE_REPORTS))
        msg = f"Unknown sample {name!r} (available: {available})"
        raise KeyError(msg) from None
