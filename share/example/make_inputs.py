"""Write toy input files for the example configs in this directory."""
import os
import ROOT

ROOT.TH1.AddDirectory(False)

SAMPLES = {
    "QCD": (5000, 20.0),
    "TTbar": (3000, 25.0),
    "DY": (2000, 30.0),
}

def fill(name, n_events, mean, seed):
    rng = ROOT.TRandom3(seed)
    hists = [
        ROOT.TH1D("h_Num_PV", "", 60, 0, 60),
        ROOT.TH1D("h_Pt_Lead", "", 100, 0, 500),
        ROOT.TH1D("h_Eta", "", 50, -2.5, 2.5),
    ]
    for _ in range(n_events):
        hists[0].Fill(rng.Poisson(mean))
        hists[1].Fill(rng.Exp(4 * mean))
        hists[2].Fill(rng.Gaus(0, 1.2))
    root_file = ROOT.TFile(os.path.join("input", f"{name}.root"), "RECREATE")
    for h in hists:
        root_file.WriteTObject(h, h.GetName())
    root_file.Close()

os.makedirs("input", exist_ok=True)
for seed, (name, (n_events, mean)) in enumerate(SAMPLES.items(), start=1):
    fill(name, n_events, mean, seed)
fill("Data", 19000, 23.0, 99)
