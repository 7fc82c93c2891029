"""Seed data for the default airline collection.

Each row is ``(iata2, icao3, prefix, iata_name, icao_name, name, call_sign)``.
"""

# fmt: off
AIRLINE_DATA: tuple[tuple[str, str, str, str, str, str, str], ...] = (
    ("AA", "AAL", "001", "American Airlines Inc.", "American Airlines", "American Airlines", "American"),
    ("B0", "DJT", "002", "DreamJet SAS t/a La Compagnie", "DreamJet SAS d/b/a La Compagnie", "La Compagnie", "Dreamjet"),
    ("BV", "BPA", "004", "Blue Panorama Airlines S.p.A.", "Blue Panorama Airlines S.p.A.", "Blue Panorama Airlines", "Blue Panorama"),
    ("DL", "DAL", "006", "Delta Air Lines, Inc.", "Delta Air Lines, Inc.", "Delta Air Lines", "Delta"),
    ("MV", "MAR", "012", "Air Mediterranean S.A.", "Air Mediterranean S.A.", "Air Mediterranean", "Hellasmed"),
    ("AC", "ACA", "014", "Air Canada", "Air Canada", "Air Canada", "Air Canada"),
    ("UA", "UAL", "016", "United Airlines, Inc.", "United Airlines, Inc.", "United Airlines", "United"),
    ("HO", "DKH", "018", "Juneyao Airlines Co,. Ltd.", "Juneyao Airlines Co. Ltd.", "Juneyao Air", "Air Juneyao"),
    ("OT", "CDO", "024", "Tchadia Airlines", "Tchadia Airlines", "Tchadia Airline", "Tchadia"),
    ("AS", "ASA", "027", "Alaska Airlines Inc.", "Alaska Airlines, Inc.", "Alaska Airlines", "Alaska"),
    ("VY", "VLG", "030", "Vueling Airlines S.A.", "Vueling Airlines, S.A.", "Vueling", "Vueling"),
    ("KP", "SKK", "032", "Compagnie Aerienne ASKY dba ASKY", "ASKY", "ASKY", "Asky Airline"),
    ("Y4", "VOI", "036", "Concesionaria Vuela Compania De Aviacion SA de CV (Volaris)", "Concesionaria Vuela Compania De, SA de CV (Volaris)", "Volaris", "Volaris"),
    ("ZF", "AZV", "037", "AZUR air Limited Liability Company", "AZUR air Limited Liability Company", "Azur Air", "Azur Air"),
    ("AR", "ARG", "044", "Aerolineas Argentinas S.A.", "Aerolineas Argentinas", "Aerolíneas Argentinas", "Argentina"),
    ("LA", "LAN", "045", "LATAM Airlines Group S.A. dba LATAM Airlines Group", "LATAM Airlines Chile", "LATAM Chile", "LAN"),
    ("TP", "TAP", "047", "TAP Portugal", "TAP Portugal", "TAP Air Portugal", "Air Portugal"),
    ("OA", "OAL", "050", "Olympic Air", "Olympic Air", "Olympic Air", "Olympic"),
    ("EI", "EIN", "053", "Aer Lingus Limited", "Aer Lingus Limited", "Aer Lingus", "Shamrock"),
    ("2D", "EAL", "054", "Eastern Airlines, LLC", "Eastern Airlines, LLC", "Eastern Airlines, LLC", "Eastern"),
    ("AZ", "ITY", "055", "Alitalia Societa Aerea Italiana S.p.A", "Italia Transporto Aereo S.p.A. d/b/a ITA S.p.A", "Alitalia", "Itarrow"),
    ("AF", "AFR", "057", "Air France", "Air France", "Air France", "Airfrans"),
    ("I2", "IBS", "060", "Compania Operadora de Corto y Medio Radio Iberia Express, S.A.U", "Compania Operadora de Corto y Medio Radio Iberia Express, S.A.U", "Iberia Express", "Iberexpres"),
    ("HM", "SEY", "061", "Air Seychelles Limited", "Air Seychelles Limited", "Air Seychelles", "Seychelles"),
    ("5Q", "HES", "062", "Holiday Europe Ltd.", "Holiday Europe Ltd.", "Holiday Europe", "Holiday Europe"),
    ("SB", "ACI", "063", "Air Caledonie International", "Air Caledonie International", "Aircalin", "Air Calin"),
    ("OK", "CSA", "064", "Czech Airlines a.s,. CSA", "Czech Airlines A.S. , CSA", "Czech Airlines", "CSA-Lines"),
    ("SV", "SVA", "065", "Saudi Arabian Airlines Corporation", "Saudi Arabian Airlines", "Saudia", "Saudia"),
    ("TM", "LAM", "068", "LAM - Linhas Aereas de Mocambique", "LAM", "LAM Mozambique Airlines", "Mozambique"),
    ("IK", "AKL", "069", "Air Kiribati Limited dba Air Kiribati", "Air Kiribati Limited", "Air Kiribati", "Air Kiribati"),
    ("RB", "SYR", "070", "Syrian Arab Airlines", "Syrian Arab Airlines", "Syrian Air", "Syrianair"),
    ("ET", "EMT", "071", "ETHIOPIAN AIRLINES", "Emetebe.com.ec Air Taxi Charter Service", "Ethiopian Airlines", "Emetebe"),
    ("GF", "GFA", "072", "Gulf Air B.S.C. (c)", "Gulf Air Company G.S.C.", "Gulf Air", "Gulf Air"),
    ("KL", "KLM", "074", "KLM", "KLM Royal Dutch Airlines (Koninklijke Luchtvaart Maatschappij N.V.)", "KLM", "KLM"),
    ("IB", "IBE", "075", "Iberia Lineas Aereas de Espana S.A. Operadora", "Iberia", "IBERIA", "Iberia"),
    ("ME", "MEA", "076", "Middle East Airlines AirLiban", "Middle East Airlines", "Middle East Airlines", "Cedar Jet"),
    ("MS", "MSR", "077", "Egyptair dba Egyptair Airlines", "Egyptair", "Egyptair", "Egyptair"),
    ("CY", "CYP", "078", "Charlie Airlines Limited dba Cyprus Airways", "Charlie Airways t/a Cyprus Airways", "Cyprus Airways", "CYPRUS"),
    ("PR", "PAL", "079", "Philippine Airlines, Inc.", "Philippine Airlines, Inc.", "Philippine Airlines", "Philippine"),
    ("LO", "LOT", "080", "LOT Polish Airlines", "LOT", "LOT Polish Airlines", "Lot"),
    ("QF", "QFA", "081", "Qantas Airways Ltd.", "Qantas Airways Ltd.", "Qantas", "Qantas"),
    ("SN", "BEL", "082", "Brussels Airlines", "Brussels Airlines N.V.", "Brussels Airlines", "Beeline"),
    ("SA", "CIG", "083", "South African Airways SOC LTD dba South african Airways", "Air Company Sirius-Aero Ltd", "South African Airways", "Sirius Aero"),
    ("PA", "ABQ", "084", "M/S Airblue Limited", "M/S Airblue (PVT) Ltd", "Airblue", "Pakblue"),
    ("NZ", "ANZ", "086", "Air New Zealand Limited", "Air New Zealand Limited", "Air New Zealand", "New Zealand"),
    ("9C", "CQH", "089", "Spring Airlines Limited Corporation", "Spring Airlines Limited Corporation", "Spring Airlines", "Air Spring"),
    ("I5", "IAD", "091", "AirAsia (India) Limited AIRASIA", "Air Asia (India) Ltd.", "AirAsia India", "Red Knight"),
    ("MQ", "ENY", "093", "Envoy Air Inc.", "Envoy Air, Inc.", "Envoy Air", "Envoy"),
    ("IR", "IRA", "096", "Iran Air", "Iran Air", "Iran Air", "Iranair"),
    ("AI", "AIC", "098", "Air India Limited dba Air India", "Air India Limited", "Air India", "Air India"),
    ("EN", "DLA", "101", "AIR DOLOMITI S.p.A. LINEE AEREE REGIONALI EUROPEE", "Air Dolomiti S.p.A. Linee Aeree Regionali Europee", "Air Dolomiti", "Dolomiti"),
    ("EW", "EWG", "104", "Eurowings GmbH", "Eurowings GmbH", "Eurowings", "Eurowings"),
    ("AY", "FIN", "105", "Finnair Oyj", "Finnair Oyj", "Finnair", "Finnair"),
    ("BW", "BWA", "106", "Caribbean Airlines Limited dba Caribbean Airlines Ltd.", "Caribbean Airlines Limited", "Caribbean Airlines", "Caribbean Airlines"),
    ("FI", "ICE", "108", "Icelandair ehf.", "Icelandair", "Icelandair", "Iceair"),
    ("LY", "ELY", "114", "El Al Israel Airlines Ltd. dba EL AL", "EL AL Israel Airlines Ltd. d/b/a El Al", "EL AL", "El Al"),
    ("JU", "ASL", "115", "JSC for Air Traffic-Air Serbia Belgrade t/a Air Serbia a.d Beograd", "JSC for Air Traffic-Air SERBIA Belgrade t/a Air Serbia a.d. Beograd", "Air Serbia", "Air Serbia"),
    ("MG", "EZA", "116", "EZNIS AIRWAYS LLC", "Eznis Airways LLC", "Eznis Airways", "EZNIS"),
    ("SK", "SAS", "117", "Scandinavian Airlines System (SAS)", "Scandinavian Airlines System (SAS)", "Scandinavian Airlines", "Scandinavian"),
    ("DT", "DTA", "118", "TAAG - Linhas Aereas de Angola (Angola Airlines)", "TAAG", "TAAG Angola Airlines", "DTA"),
    ("JS", "KOR", "120", "Air Koryo", "Air Koryo", "Air Koryo", "Air Koryo"),
    ("ON", "RON", "123", "Nauru Air Corporation dba Nauru Airlines", "Nauru Air Corporation t/a Nauru Airlines", "Nauru Airlines", "AIR NAURU"),
    ("AH", "DAH", "124", "Air Algerie", "Air Algerie", "Air Algérie", "Air Algerie"),
    ("BA", "BAW", "125", "British Airways p.l.c.", "British Airways P.L.C.", "British Airways", "Speedbird"),
    ("GA", "GIA", "126", "PT. Garuda Indonesia (PERSERO) Tbk dba Garuda Indonesia", "Garuda Indonesia", "Garuda Indonesia", "Indonesia"),
    ("G3", "GLO", "127", "GOL Linhas Aereas S.A.", "GOL Linhas Aereas Inteligentes", "Gol Linhas Aéreas Inteligentes", "Gol Transporte"),
    ("UO", "HKE", "128", "Hong Kong Express Airways Limited", "Hong Kong Express Airways Ltd", "HK Express", "Hongkong Shuttle"),
    ("5F", "FIA", "130", "Fly One S.R.L.", "FlyOne Airlines S.R.L.", "FLYONE", "Fia Airlines"),
    ("JL", "JAL", "131", "Japan Airlines Co., Ltd.", "Japan Airlines International Co. Ltd.", "Japan Airlines", "Japanair"),
    ("LR", "LRC", "133", "Avianca Costa Rica, S.A. dba Avianca Costa Rica, S.A.", "Avianca Costa Rica S.A.", "Avianca Costa Rica", "LACSA"),
    ("AV", "AVA", "134", "Aerovias del Continente Americano S.A. AVIANCA", "Avianca", "Avianca", "Avianca"),
    ("VT", "VTA", "135", "Air Tahiti", "Air Tahiti", "Air Tahiti", "Air Tahiti"),
    ("CU", "CUB", "136", "Cubana de Aviacion S.A.", "Cubana de Aviacion, S.A.", "Cubana de Aviación", "Cubana"),
    ("AM", "AMX", "139", "Aeromexico", "Aeromexico Aerovias de Mexico S.A. de C.V.", "Aeroméxico", "Aeromexico"),
    ("FZ", "FDB", "141", "Flydubai dba Dubai Aviation Corporation \"FLYDUBAI\"", "Dubai Aviation Corporation d/b/a flydubai", "Flydubai", "Sky Dubai"),
    ("KF", "ABB", "142", "Air Belgium SA", "Air Belgium SA", "Air Belgium S.A.", "Air Belgium"),
    ("XK", "CCM", "146", "Air Corsica", "Air Corsica", "Air Corsica", "Corsica"),
    ("AT", "RAM", "147", "Royal Air Maroc", "Royal Air Maroc", "Royal Air Maroc", "Royalair Maroc"),
    ("LN", "LAA", "148", "Libyan Airlines", "Libyan Airlines", "Libyan Airlines", "Libair"),
    ("LG", "LGL", "149", "Luxair", "Luxair", "Luxair", "Luxair"),
    ("UG", "TUX", "150", "Tunisair Express", "Tunisair Express", "Tunisair Express", "Tunexpress"),
    ("R5", "JAV", "151", "Jordan Aviation dba Jordan Aviation Airlines", "Jordan Enterprise for Air Navigation and Aviation", "Jordan Aviation", "Jordan Aviation"),
    ("2I", "CSB", "156", "Star Up S.A. dba Star Peru", "21 Air LLC", "21 Air", "Cargo South"),
    ("QR", "QTR", "157", "Qatar Airways (Q.C.S.C.)", "Qatar Airways Group Q.C.S.C.", "Qatar Airways", "Qatari"),
    ("CX", "CPA", "160", "Cathay Pacific Airways Ltd.", "Cathay Pacific Airways Ltd.", "Cathay Pacific", "Cathay"),
    ("MN", "CAW", "161", "Comair Ltd.", "Comair Ltd.", "Comair (South Africa)", "Commercial"),
    ("OL", "PAO", "162", "Polynesian Limited dba Samoa Airways", "Samoa Airways", "Samoa Airways", "Polynesian"),
    ("UM", "AZW", "168", "Air Zimbabwe (Pvt) Ltd.", "Air Zimbabwe (PVT) Ltd.", "Air Zimbabwe", "Air Zimbabwe"),
    ("HR", "HHN", "169", "Hahn Air Lines GmbH", "Hahn Air Lines", "Hahn Air", "Rooster"),
    ("HA", "HAL", "173", "Hawaiian Airlines, Inc.", "Hawaiian Airlines", "Hawaiian Airlines", "Hawaiian"),
    ("EK", "UAE", "176", "Emirates", "Emirates", "Emirates (airline)", "Emirates"),
    ("OR", "TFL", "178", "TUI Airlines Nederland B.V.", "TUI Airlines Nederlands B.V. t/a TUI fly Netherlands", "TUI fly Netherlands", "Orange"),
    ("KE", "KAL", "180", "Korean Air Lines Co. Ltd.", "Korean Air", "Korean Air", "Koreanair"),
    ("XR", "CXI", "187", "Touristic Aviation Services Ltd dba Corendon Airlines Europe", "Touristic Aviation Services Ltd. t/a Corendon Airlines Europe", "Corendon Airlines Europe", "Touristic"),
    ("K6", "KHV", "188", "Cambodia Angkor Air t/a Cambodia Angkor Air Co., Ltd.", "Cambodia Angkor Air Ltd.", "Cambodia Angkor Air", "Cambodia Air"),
    ("TY", "TPC", "190", "Air Caledonie", "Air Caledonie", "Air Calédonie", "Aircal"),
    ("PY", "SLM", "192", "Surinaamse Luchtvaart Maatschappij N.V dba Surinam Airways", "Surinam Airways Ltd.", "Surinam Airways", "Surinam"),
    ("IE", "SOL", "193", "Solomon Airlines Limited", "Solomon Airlines", "Solomon Airlines", "Solomon"),
    ("FV", "SDM", "195", "Rossiya Airlines JSC", "Rossiya Airlines JSC", "Rossiya Airlines", "Rossiya"),
    ("TC", "ATC", "197", "Air Tanzania Company Limited", "Air Tanzania Company Limited", "Air Tanzania", "Tanzania"),
    ("TU", "TAR", "199", "Tunisair", "Tunisair", "Tunisair", "Tunair"),
    ("SD", "SUD", "200", "Sudan Airways Co. Ltd.", "Sudan Airways Co. Ltd.", "Sudan Airways", "Sudanair"),
    ("TA", "TAK", "202", "TACA International Airlines S.A.", "Transafrican Air Limited", "TACA", "Transafrican"),
    ("5J", "CEB", "203", "Cebu Air, Inc dba Cebu Pacific Air", "Cebu Air, Inc. d/b/a Cebu Pacific Air", "Cebu Pacific", "Cebu Air"),
    ("NH", "ANA", "205", "All Nippon Airways Co. Ltd.", "All Nippon Airways Co. Ltd.", "All Nippon Airways", "All Nippon"),
    ("AG", "ARU", "209", "Arubaanse Luchtvaart Maatschappij NV dba Aruba Airlines", "Arubaanse Luchtvaart Maatschappij N.V dba Aruba Airlines", "Aruba Airlines", "Aruba"),
    ("2P", "GAP", "211", "Air Philippines Corporation dba PAL Express and Airphil Express", "Air Philippines Corporation d/b/a PAL Express and Airphil Express", "PAL Express", "Airphil"),
    ("PK", "PIA", "214", "Pakistan International Airlines Corporation Limited", "Pakistan International Airlines", "Pakistan International Airlines", "Pakistan"),
    ("N4", "NWS", "216", "LLC \"Nord Wind\"", "LLC \"Nord Wind\"", "Nordwind Airlines", "Nordland"),
    ("TG", "THA", "217", "Thai Airways International Public Company Ltd. dba Thai", "Thai Airways International Public Company Ltd.", "Thai Airways", "Thai"),
    ("NF", "AVN", "218", "Air Vanuatu (Operations) Limited dba Air Vanuatu", "Air Vanuatu (Operations) Limited", "Air Vanuatu", "Air Van"),
    ("YN", "CRQ", "219", "Air Creebec (1994) Inc.", "Air Creebec (1994), Inc.", "Air Creebec", "Cree"),
    ("LH", "DLH", "220", "Deutsche Lufthansa AG", "Deutsche Lufthansa AG", "Lufthansa", "Lufthansa"),
    ("UK", "VTI", "228", "TATA SIA AIRLINES LTD dba VISTARA", "TATA SIA Airlines Limited t/a Vistara", "Vistara", "Vistara"),
    ("KU", "KAC", "229", "Kuwait Airways", "Kuwait Airways", "Kuwait Airways", "Kuwaiti"),
    ("CM", "CMP", "230", "Compania Panamena de Aviacion, S.A. (COPA)", "Copa Airlines, Inc", "Copa Airlines", "COPA"),
    ("MH", "MAS", "232", "Malaysia Airlines Berhad dba Malaysia Airlines", "Malaysia Airlines Berhad d/b/a Malaysia Airlines", "Malaysia Airlines", "Malaysian"),
    ("TK", "THY", "235", "Turkish Airlines Inc.", "Turkish Airlines, Inc.", "Turkish Airlines", "Turkish"),
    ("QB", "QSM", "237", "Qeshm Air", "Qeshm Air", "Qeshm Air", "Qeshm Air"),
    ("IZ", "AIZ", "238", "Arkia Israeli Airlines Ltd", "Arkia Israeli Airlines Ltd.", "Arkia", "Arkia"),
    ("MK", "MAU", "239", "Air Mauritius Ltd", "Air Mauritius", "Air Mauritius", "Airmauritius"),
    ("GU", "GUG", "240", "AVIATECA, S.A.", "AVIATECA, S.A.", "Avianca Guatemala", "AVIATECA"),
    ("EL", "ELB", "241", "Ellinair S.A", "Ellinair S.A.", "Ellinair", "ELLINAIR HELLAS"),
    ("TN", "THT", "244", "Air Tahiti Nui", "Air Tahiti Nui", "Air Tahiti Nui", "Tahiti Airlines"),
    ("HY", "UZB", "250", "Uzbekistan Airways", "Uzbekistan Havo Yullary", "Uzbekistan Airways", "Uzbek"),
    ("FG", "AFG", "255", "Ariana Afghan Airlines dba Ariana Afghan Airlines", "Ariana Afghan Airlines", "Ariana Afghan Airlines", "Ariana"),
    ("OS", "AUA", "257", "Austrian Airlines AG dba Austrian", "Austrian Airlines AG d/b/a/ Austrian", "Austrian Airlines", "Austrian"),
    ("MD", "MDG", "258", "Air Madagascar", "Air Madagascar", "Air Madagascar", "Air Madagascar"),
    ("FJ", "FJI", "260", "Air Pacific Limited t/a Fiji Airway", "Air Pacific Ltd. t/a Fiji Airways", "Fiji Airways", "Fiji"),
    ("U6", "SVR", "262", "Joint Stock Company \"Ural Airlines\"", "Ural Airlines", "Ural Airlines", "Sverdlovsk Air"),
    ("GP", "RIV", "275", "APG Airlines", "APG Airlines", "APG Airlines", "Riviera"),
    ("J7", "ABS", "277", "Afrijet Business Service dba Afrijet", "Afrijet Business Services d/b/a Afrijet", "Afrijet Business Service", "AFRIJET"),
    ("RO", "ROT", "281", "COMPANIA NATIONALA DE TRANSPORTURI AERIENE ROMANE TAROM S.A.", "Compnia Nationala de Transporturi Aeriene Romane TAROM S.A.", "TAROM", "Tarom"),
    ("RA", "RNA", "285", "Nepal Airlines Corporation", "Nepal Airlines Corporation t/a Nepal Airlines", "Nepal Airlines", "Royal Nepal"),
    ("4N", "ANT", "287", "Air North Charter and Training Ltd.", "Air North Charter and Training Ltd. t/a Air North", "Air North", "Air North"),
    ("OM", "MGL", "289", "MIAT Mongolian Airlines", "MIAT", "MIAT Mongolian Airlines", "Mongol Air"),
    ("WG", "SWG", "292", "Sunwing Airlines Inc.", "Sunwing Airlines Inc", "Sunwing Airlines", "SUNWING"),
    ("WM", "WIA", "295", "Windward Islands Airways Int'l N.V. dba WINAIR", "Windward Islands Airways International N.V.", "Winair", "Windward"),
    ("CI", "CAL", "297", "China Airlines Ltd.", "China Airlines", "China Airlines", "Dynasty"),
    ("UT", "UTA", "298", "UTair Aviation", "Utair Aviation Joint-Stock Company", "Utair", "Tjumavi"),
    ("5S", "GAK", "301", "Global Air Transport", "Global Aviation Services Group", "Global Aviation and Services Group", "AVIAGROUP"),
    ("ZW", "AWI", "303", "Air Wisconsin Airlines Corporation (AWAC)", "Air Wisconsin Airlines Corporation (AWAC)", "Air Wisconsin", "Wisconsin"),
    ("C2", "CEL", "304", "CEIBA Intercontinental", "Ceiba Intercontinental", "CEIBA Intercontinental", "Ceiba Line"),
    ("V0", "VCV", "308", "CONVIASA", "Conviasa", "Conviasa", "CONVIASA"),
    ("6E", "IGO", "312", "Interglobe Aviation Ltd. dba Indigo", "Interglobe Aviation Ltd. d/b/a Indigo", "IndiGo", "Ifly"),
    ("5N", "AUL", "316", "Joint Stock Company Smartavia Airlines", "Joint Stock Company Smartavia Airlines", "Smartavia", "Dvina"),
    ("SC", "CDG", "324", "Shandong Airlines", "Shandong Airlines", "Shandong Airlines", "Shandong"),
    ("NP", "NIA", "325", "Nile Air", "Nile Air", "Nile Air", "Nile Bird"),
    ("D8", "IBK", "329", "Norwegian Air International LTD.", "Norwegian Air International Ltd.", "Norwegian Air International", "Nortrans"),
    ("S4", "RZO", "331", "SATA  Internacional - Azores Airlines, S.A.", "SATA International Servicos e Transportes Aereos, S.A. t/a Azores Airlines", "Azores Airlines", "Air Azores"),
    ("VB", "VIV", "333", "Aeroenlaces Nacionales S.A. de C.V.", "Aeroenlaces Nacionales, S.A. de C.V. t/a viva aerobus", "VivaAerobús", "AEROENLACES"),
    ("SY", "SCX", "337", "MN Airlines LLC", "MN Airlines, LLC d/b/a Sun Country Airlines", "Sun Country Airlines", "Sun Country"),
    ("0V", "VFC", "338", "Vietnam Air Service Company (VASCO)", "Vietnam Air Service Company", "Vietnam Air Services Company", "Vasco Air"),
    ("NU", "JTA", "353", "Japan Transocean Air Co. Ltd.", "Japan Transocean Air Co. Ltd.", "Japan Transocean Air", "Jai Ocean"),
    ("J4", "BDR", "367", "Badr Airlines", "Badr Airlines", "Badr Airlines", "Badr Air"),
    ("N3", "VOS", "370", "Vuela El Salvador S.A. de C.V.", "Veula El Salvador S.A. de C.V.", "Volaris El Salvador", "Jetsal"),
    ("AP", "LAV", "374", "Alba Star,S.A. dba Alba Star", "Alba Star, S.A. d/b/a Alba Star.es", "AlbaStar", "Albastar"),
    ("KX", "CAY", "378", "Cayman Airways Limited", "Cayman Airways Limited", "Cayman Airways", "Cayman"),
    ("SM", "MSC", "381", "Air Cairo", "Air Cairo", "Air Cairo", "AIR CAIRO"),
    ("RQ", "KMF", "384", "Kam Air dba Kam Air", "Kam Air", "Kam Air", "Kamgar"),
    ("A6", "OTC", "389", "Air Travel Co. Ltd.", "Air Travel Co., Ltd.", "Air Travel (airline)", "Air Travel"),
    ("A3", "AEE", "390", "Aegean Airlines", "Aegean Airlines, S.A.", "Aegean Airlines", "Aegean"),
    ("BF", "FBU", "396", "French Bee dba French Bee", "French bee", "French Bee", "French Bee"),
    ("SZ", "SMR", "413", "Aircompany Somon Air LLC dba Somon Air", "Aircompany Somon Air LLC", "Somon Air", "Somon Air"),
    ("N8", "NCR", "416", "National Air Cargo Group, Inc. dba National Airlines", "National Air Cargo Group, Inc. d/b/a National Airlines", "National Airlines (N8)", "National Cargo"),
    ("S7", "SBI", "421", "JSC Siberia Airlines dba S7 airlines", "JSC Siberia Airlines d/b/a S7 Airlines", "S7 Airlines", "Siberian Airlines"),
    ("F9", "FFT", "422", "Frontier Airlines, Inc.", "Frontier Airlines, Inc.", "Frontier Airlines", "Frontier Flight"),
    ("TX", "FWI", "427", "Air Caraibes", "Air Caraibes", "Air Caraïbes", "French West"),
    ("9E", "EDV", "430", "Endeavor Air", "Endeavor Air, Inc.", "Endeavor Air", "Endeavor"),
    ("P6", "PSC", "433", "Privilege Style S.A.", "9736140 Canada Inc t/a Pascan", "Pascan Aviation", "Pascan"),
    ("RM", "NGT", "437", "Aircompany Armenia LLC", "Aircompany Armenia LLC", "Aircompany Armenia", "Nika"),
    ("ZP", "AZP", "445", "Compania de Aviacion Paraguaya S.A dba Paranair", "Compañía de Aviación Paraguaya S.A. d/b/a Paranair", "Paranair", "Guarani"),
    ("3M", "SIL", "449", "Silver Airways Corp", "Silver Airways Corp.", "Silver Airways", "Silver Wings"),
    ("PD", "POE", "451", "Porter Airlines Inc.", "Porter Airlines Inc.", "Porter Airlines", "PORTER"),
    ("3O", "MAC", "452", "Air Arabia Maroc", "Air Arabia Maroc", "Air Arabia Maroc", "Arabia Maroc"),
    ("YX", "RPA", "453", "Republic Airways Inc", "Republic Airline, Inc.", "Republic Airways", "Brickyard"),
    ("Z2", "APG", "457", "Philippines AirAsia, INC. dba AirAsia", "Philippines AirAsia Inc. t/a AirAsia Philippines", "Philippines AirAsia", "Cool Red"),
    ("WB", "RWD", "459", "RwandAir  Limited", "RwandAir Limited", "RwandAir", "Rwandair"),
    ("EB", "PLM", "460", "WAMOS AIR, S.A.", "Wamos Air, S.A.", "Wamos Air", "Pullman"),
    ("7W", "WRC", "461", "Wind Rose Aviation Company", "Wind Rose Aviation Company Ltd t/a WINDROSE Airlines", "Windrose Airlines", "Wind Rose"),
    ("XL", "LNE", "462", "Aerolane Lineas Aerea Nacional dba Latam Airlines Ecuador", "Aerolane", "LATAM Airlines Ecuador", "LAN Ecuador"),
    ("KC", "KZR", "465", "JSC AIR ASTANA", "Air Astana", "Air Astana", "Astanaline"),
    ("3H", "AIE", "466", "Air Inuit Ltd/Ltee", "Air Inuit Ltd/Ltee.", "Air Inuit", "Inuit"),
    ("0B", "BLA", "475", "Blue Air Aviation S.A.", "Blue Air Aviation S.A.", "Blue Air", "Blue Air"),
    ("Y7", "TYA", "476", "Joint-stock company NordStar Airlines dba NORDSTAR", "Joint-stock company NordStar Airlines d/b/a NordStar", "NordStar", "Taimyr"),
    ("ZH", "CSZ", "479", "Shenzhen Airlines", "Shenzhen Airlines", "Shenzhen Airlines", "Shenzhen Air"),
    ("QX", "QXE", "481", "Horizon Air Industries, Inc.", "Horizon Air Industries, Inc.", "Horizon Air", "Horizon Air"),
    ("J9", "JZR", "486", "Jazeera Airways", "Jazeera Airways", "Jazeera Airways", "Jazeera"),
    ("NK", "NKS", "487", "Spirit Airlines", "Spirit Airlines, Inc.", "Spirit Airlines", "Spirit Wings"),
    ("B9", "IRB", "491", "Iran Airtour Airline", "Iran Airtour Airline", "Iran Airtour", "IRAN AIRTOUR"),
    ("Y5", "GMR", "509", "Golden Myanmar Airlines Public Co. Ltd dbaGolden Myanmar Airlines Public Co.Ltd", "Golden Myanmar Airlines Public Co., Ltd", "Golden Myanmar Airlines", "Golden Myanmar"),
    ("YK", "AVJ", "511", "Avia Traffic Company LLC dba Avia Traffic Company LLC", "Avia Traffic Company LLC", "Avia Traffic Company", "Atomic"),
    ("RJ", "RJA", "512", "Alia - The Royal Jordanian Airlines dba Royal Jordanian", "Alia", "Royal Jordanian", "Jordanian"),
    ("G9", "ABY", "514", "Air Arabia dba Air Arabia", "Air Arabia PJSC", "Air Arabia", "Arabia"),
    ("5T", "AKT", "518", "Canadian North Inc.", "Canadian North Inc.", "Canadian North", "Arctic"),
    ("B7", "UIA", "525", "UNI Airways Corporation", "UNI Airways Corporation", "Uni Air", "Glory"),
    ("WN", "SWA", "526", "Southwest Airlines Co.", "Southwest Airlines Co.", "Southwest Airlines", "Southwest"),
    ("3W", "MWI", "529", "Malawi Airlines", "Malawian Airlines", "Malawi Airlines", "MALAWIAN"),
    ("YV", "ASH", "533", "Mesa Airlines, Inc.", "Mesa Airlines, Inc.", "Mesa Airlines", "Air Shuttle"),
    ("W5", "IRM", "537", "Mahan Air", "Mahan Air", "Mahan Air", "Mahan Air"),
    ("5H", "FFV", "540", "Five Forty Aviation Ltd dba Five Forty Aviation Ltd", "Five Fourty Aviation Limited", "Fly540", "Swift Tango"),
    ("T5", "TUA", "542", "Turkmenistan Airlines dba Turkmenistan Airlines", "Turkmenistan Airlines", "Turkmenistan Airlines", "Turkmenistan"),
    ("LP", "LPE", "544", "LATAM Airlines Peru S.A.", "Lan Peru, S.A. d/b/a LATAM Airlines Peru", "LATAM Perú", "Lanperu"),
    ("8U", "AAW", "546", "Afriqiyah Airways", "Afriqiyah Airways", "Afriqiyah Airways", "Afriqiyah"),
    ("2K", "GLG", "547", "AVIANCA-Ecuador dba AVIANCA", "Avianca Ecuador d/b/a Avianca", "Avianca Ecuador", "Galapagos"),
    ("BL", "PIC", "550", "Pacific Airlines / Pacific Airlines Aviation JSC", "Pacific Airlines Co. Ltd.", "Pacific Airlines", "Pacific Express"),
    ("YU", "MMZ", "551", "EuroAtlantic Airways", "EuroAtlantic Airways Transportes Aereos, S.A.", "EuroAtlantic Airways", "Euroatlantic"),
    ("SU", "AFL", "555", "PJSC Aeroflot", "PJSC \"Aeroflot\"", "Aeroflot", "Aeroflot"),
    ("5O", "FPO", "558", "ASL AIRLINES FRANCE", "ASL Airlines France S.A.", "ASL Airlines France", "French Post"),
    ("XQ", "SXS", "564", "SunExpress", "SunExpress", "SunExpress", "Sunexpress"),
    ("PS", "AUI", "566", "Private Stock Company \"Ukraine International Airlines\" dba UIA", "Private Stock Company \"Ukraine International Airlines\"", "Ukraine International Airlines", "Ukraine International"),
    ("9D", "NMG", "568", "Genghis Khan Airlines Co., Ltd", "Genghis Khan Airlines Co., Ltd.", "Genghis Khan Airlines", "Tianjiao Air"),
    ("9U", "MLD", "572", "Air Moldova", "Air Moldova", "Air Moldova", "Air Moldova"),
    ("G7", "GJS", "573", "GoJet Airlines LLC", "GoJet Airlines LLC", "GoJet Airlines", "Lindbergh"),
    ("AD", "AZU", "577", "Azul Linhas Aereas Brasileiras", "Azul Linhas Aereas Brasileiras", "Azul Brazilian Airlines", "Azul"),
    ("5B", "BSX", "590", "Bassaka Air Limited dba Bassaka Air", "Bassaka Air Limited d/b/a Bassaka Air", "Bassaka Air", "Bassaka"),
    ("XY", "KNE", "593", "Flynas Company Closed Joint Stock owned by (NAS Holding) JSC", "Flynas Company Closed Joint Stock owned by (NAS Holding) JSC", "Flynas", "Nas Express"),
    ("DD", "NOK", "596", "Nok Airlines Public Company Limited dba Nok Air", "Nok Airlines Public Co., Ltd. d/b/a Nok Air", "Nok Air", "Nok Air"),
    ("HZ", "SHU", "598", "Joint-Stock Company Aurora Airlines", "Joint- Stock Company \"Aurora Airlines\"", "Aurora (airline)", "Aurora"),
    ("8M", "MMA", "599", "Myanmar Airways International Company Limited", "Myanmar Airways International Company Ltd.", "Myanmar Airways International", "Myanmar"),
    ("UL", "ALK", "603", "SriLankan Airlines Limited", "SriLankan Airlines Limited", "SriLankan Airlines", "Srilankan"),
    ("H2", "SKU", "605", "Sky Airline S.A.", "Sky Airline S.A.", "Sky Airline", "Aerosky"),
    ("A9", "TGZ", "606", "Georgian Airways", "Georgian Airways", "Georgian Airways", "Tamazi"),
    ("EY", "ETD", "607", "Etihad Airways dba Etihad", "Etihad Airways d/b/a Etihad", "Etihad Airways", "Etihad"),
    ("IT", "TTW", "608", "Tigerair Taiwan Co. Ltd", "Tiger Airways Taiwan Co. Ltd.", "Tigerair Taiwan", "Smart Cat"),
    ("TB", "JAF", "612", "TUI Airlines Belgium N.V dba TUI fly", "TUI Airlines Belgium NV t/a TUI fly Belgium", "TUI fly Belgium", "Beauty"),
    ("6A", "AMW", "616", "Armenia Airways Air Company CJSC", "Armenia Airways Air company CJSC", "Armenia Airways", "ARMENIA"),
    ("X3", "TUI", "617", "TUIfly GmbH", "TUIfly GmbH", "TUI fly Deutschland", "Tuifly"),
    ("SQ", "SIA", "618", "Singapore Airlines Limited", "Singapore Airlines Limited", "Singapore Airlines", "Singapore"),
    ("Q6", "VOC", "621", "Vuela Aviacion S.A Volaris Costa Rica", "Vuela Aviacion S.A. (Volaris Costa Rica)", "Volaris Costa Rica", "Costa Rican"),
    ("MO", "CAV", "622", "Calm Air International Ltd.", "Calm Air International Ltd.", "Calm Air", "Calm Air"),
    ("FB", "LZB", "623", "Bulgaria Air JSC", "Bulgaria Air", "Bulgaria Air", "Flying Bulgaria"),
    ("PC", "PGT", "624", "Pegasus Hava Tasimaciligi A.S.", "Pegasus Hava Tasimaciligi A.S.", "Pegasus Airlines", "Sunturk"),
    ("CG", "TOK", "626", "PNG Air Limited", "PNG Air Limited.", "PNG Air", "Balus"),
    ("QV", "LAO", "627", "Lao Airlines", "Lao Airlines", "Lao Airlines", "Lao"),
    ("B2", "BRU", "628", "Belavia - Belarusian Airlines dba Belavia", "Belavia", "Belavia", "Belavia"),
    ("MI", "SLK", "629", "SilkAir (SINGAPORE) Pte. Ltd.", "SilkAir (SINGAPORE) Pte. Ltd.", "SilkAir", "Silkair"),
    ("GL", "GRL", "631", "Air Greenland A/S", "Air Greenland A/S", "Air Greenland", "Greenland"),
    ("JV", "BLS", "632", "Perimeter Aviation LP dba Bearskin Airlines", "Perimeter Aviation LP d/b/a Bearskin Airlines", "Bearskin Airlines", "Bearskin"),
    ("9M", "GLR", "634", "Central Mountain Air Ltd.", "Central Mountain Air Ltd.", "Central Mountain Air", "Glacier"),
    ("IY", "IYE", "635", "Yemenia - Yemen Airways", "Yemenia", "Yemenia", "Yemeni"),
    ("BP", "BOT", "636", "Air Botswana", "Air Botswana Corporation", "Air Botswana", "Botswana"),
    ("B8", "ERT", "637", "Eritrean Airlines s.c. dba Eritrean Airlines s.c.", "Eritrean Airlines", "Eritrean Airlines", "Eritrean"),
    ("PJ", "SPM", "638", "Air Saint  Pierre", "Air Saint Pierre", "Air Saint-Pierre", "SAINT-PIERRE"),
    ("8Y", "AAV", "639", "Astro Air International Inc. dba PAN PACIFIC AIRLINES", "Astro Air International Inc. d/b/a Pan Pacific Airlines", "Pan Pacific Airlines", "Astro-Phil"),
    ("FA", "SFR", "640", "Safair Operations (Proprietary) Ltd dba Safair", "Safair Operations (Proprietary) Ltd. dba Safair", "Safair", "Cargo"),
    ("5D", "SLI", "642", "Aerolitoral S.A. de C.V.", "Aerolitoral, S.A. de C.V., d/b/a Aerom�xico Connect", "Aeroméxico Connect", "Costera"),
    ("KM", "AMC", "643", "Air Malta p.l.c.", "Air Malta p.l.c.", "Air Malta", "Air Malta"),
    ("TS", "TSC", "649", "Air Transat", "Air Transat", "Air Transat", "Transat"),
    ("DV", "VSV", "655", "JSC Aircompany SCAT", "PLL Scat Aircompany", "SCAT Airlines", "Vlasta"),
    ("PX", "ANG", "656", "Air Niugini Pty Limited dba Air Niugini", "Air Niugini Pty Limited d/b/a Air Niugini", "Air Niugini", "Niugini"),
    ("BT", "BTI", "657", "Air Baltic Corporation A/S", "Air Baltic Corporation S/A", "airBaltic", "Airbaltic"),
    ("GY", "CGZ", "661", "Colorful GuiZhou Airlines Co., Ltd", "Colorful GuiZhou Airlines Co., Ltd", "Colorful Guizhou Airlines", "Colorful"),
    ("PU", "PUE", "663", "Plus Ultra Lineas Aereas, S. A.", "Plus Ultra Lineas Aereas, S.A.", "Plus Ultra Líneas Aéreas", "Spanish"),
    ("YC", "LLM", "664", "Joint-Stock Company \"Yamal Airlines", "Yamal Airlines", "Yamal Airlines", "Yamal"),
    ("FU", "FZA", "666", "Fuzhou Airlines Co., Ltd", "Fuzhou Airlines Co., Ltd.", "Fuzhou Airlines", "Strait Air"),
    ("MJ", "MYW", "669", "Myway Airlines Co.,LTD", "MyWay Airlines Co., Ltd.", "MyWay Airlines", "My Sky"),
    ("BI", "RBA", "672", "Royal Brunei Airlines Sdn. Bhd. dba Royal Brunei Airlines", "Royal Brunei Airlines Sdn. Bhd.", "Royal Brunei Airlines", "Brunei"),
    ("NX", "AMU", "675", "Air Macau Company Limited", "Air Macau Company Limited", "Air Macau", "Air Macau"),
    ("LM", "LOG", "682", "Loganair Limited", "Loganair Limited", "Loganair", "Logan"),
    ("CL", "CLH", "683", "Lufthansa CityLine GmbH", "Lufthansa CityLine", "Lufthansa CityLine", "Hansaline"),
    ("NI", "PGA", "685", "Portugalia - Companhia Portuguesa de Transportes Aereos SA", "Portugalia", "PGA-Portugalia Airlines", "Portugalia"),
    ("WX", "BCY", "689", "Cityjet", "Cityjet", "CityJet", "City-Ireland"),
    ("PZ", "LAP", "692", "Transportes Aereos del Mercosur S.A dba LATAM Airlines Paraguay", "TAM", "LATAM Airlines Paraguay", "Paraguaya"),
    ("YW", "ANE", "694", "Air Nostrum", "Air Nostrum Lineas Aereas del Mediterraneo, S.A.", "Air Nostrum", "Nostru Air"),
    ("BR", "EVA", "695", "EVA Airways Corporation", "EVA Airways Corporation", "EVA Air", "Eva"),
    ("VR", "TCV", "696", "Transportes Aereos de Cabo Verde dba TACV Cabo Verde Airlines", "Transportes Aereos de Cabo Verde (TACV) d/b/a Cabo Verde Airlines", "Cabo Verde Airlines", "Caboverbe"),
    ("WF", "WIF", "701", "Wideroe's Flyveselskap A.S.", "Wideroe's Flyveselskap A/S", "Widerøe", "Wideroe"),
    ("KQ", "KQA", "706", "Kenya Airways PLC", "Kenya Airways", "Kenya Airways", "Kenya"),
    ("P4", "APK", "710", "Air Peace Limited", "Air Peace Limited", "Air Peace", "Peace Bird"),
    ("LX", "SWR", "724", "SWISS International Air Lines Ltd dba SWISS", "Swiss International Airlines Ltd. d/b/a Swiss", "Swiss International Air Lines", "Swiss"),
    ("GT", "CGH", "730", "Air Guilin Co. Ltd.", "Air Guilin Co., Ltd.", "Air Guilin", "Welkin"),
    ("MF", "CXA", "731", "Xiamen Airlines", "Xiamen Airlines", "XiamenAir", "Xiamen Air"),
    ("ZD", "EWR", "732", "EWA Air", "EWA Air", "Ewa Air", "Mayotte Air"),
    ("SP", "SAT", "737", "SATA (Air Acores)", "SATA", "SATA Air Açores", "SATA"),
    ("VN", "HVN", "738", "Vietnam Airlines JSC dba Vietnam Airlines JSC", "Vietnam Airlines Corporation", "Vietnam Airlines", "Vietnam Airlines"),
    ("9V", "ROI", "742", "Avior Airlines, C.A. dba Avior Airlines", "Aviones de Oriente, C.A. (AVIOR)", "Avior Airlines", "Avior"),
    ("3N", "URG", "746", "Air Urga", "Air Urga", "Air Urga", "Urga"),
    ("4Z", "LNK", "749", "SA Airlink (PTY) LTD dba South African Airlink", "Airlink (Pty) Ltd.", "Airlink", "Link"),
    ("RL", "ABG", "750", "JSC Royal Flight Airlines", "CJSC Royal Flight Airlines", "Royal Flight (airline)", "Royal Flight"),
    ("3V", "TAY", "756", "ASL Airlines Belgium", "ASL Airlines Belgium", "ASL Airlines Belgium", "Quality"),
    ("F7", "RSY", "757", "LTD I Fly", "The Airline iFly", "I-Fly", "Russian Sky"),
    ("VU", "VAG", "759", "Vietravel Airlines Co., Ltd.", "Vietravel Airlines Co., Ltd.", "Vietravel Airlines", "Vietravel Air"),
    ("UU", "REU", "760", "Air Austral", "Air Austral", "Air Austral", "Reunion"),
    ("QU", "UTN", "761", "Azur Air Ukraine Airlines LLC", "Azur Air Ukraine Airlines LLC", "Azur Air Ukraine", "UT-Ukraine"),
    ("DI", "NRS", "762", "Norwegian Air UK ltd", "Norwegian Air UK Ltd.", "Norwegian Air UK", "Rednose"),
    ("RC", "FLI", "767", "Atlantic Airways, Faroe Islands, P/F", "Atlantic Airways Faroe Islands", "Atlantic Airways", "Faroeline"),
    ("H9", "HIM", "769", "Himalaya Airlines Pvt. Ltd.", "Himalaya Airlines Pvt. Ltd.", "Himalaya Airlines", "Himalaya"),
    ("EO", "KAR", "770", "LLC \"Aircompany \"Ikar\" dba Pegas Fly", "Ikar, LLC t/a Pegas Fly", "Pegas Fly", "Krasjet"),
    ("J2", "AHY", "771", "Azerbaijan Hava Yollary", "Azerbaijan Airlines CJSC", "Azerbaijan Airlines", "Azal"),
    ("FM", "CSH", "774", "Shanghai Airlines Co. Ltd.", "Shanghai Airlines Co. Ltd.", "Shanghai Airlines", "Shanghai Air"),
    ("SG", "SEJ", "775", "SpiceJet Ltd.", "SpiceJet Ltd", "SpiceJet", "Spicejet"),
    ("MU", "CES", "781", "China Eastern Airlines", "China Eastern Airlines", "China Eastern", "China Eastern"),
    ("QL", "LER", "782", "Linea Aerea De Servicio Ejecutivo Regional, C.A. dba Laser", "Linea Aerea de Servicio Ejecutivo Regional, C.A. d/b/a Laser", "LASER Airlines", "Laser"),
    ("E9", "EVE", "783", "Evelop Airlines S.L.", "Evelop Airlines S.L. d/b/a iberojet", "Iberojet (airline)", "Evelop"),
    ("CZ", "CSN", "784", "China Southern Airlines", "China Southern Airlines", "China Southern Airlines", "China Southern"),
    ("B3", "BTN", "786", "Bhutan Airlines dba Tashi Air Pvt Ltd.", "Tashi Air Private Ltd. t/a Bhutan Airlines", "Bhutan Airlines", "Bhutan Air"),
    ("KB", "DRK", "787", "Druk Air Corporation Ltd.", "Druk Air Corporation Ltd.", "Druk Air", "Royal Bhutan"),
    ("VA", "VOZ", "795", "Virgin Australia International Airlines Pty Ltd", "Virgin Australia International Airlines Pty Ltd", "Virgin Australia", "Velocity"),
    ("BJ", "LBT", "796", "Nouvelair Tunisie", "Nouvelair Tunisie", "Nouvelair", "Nouvelair"),
    ("QS", "TVS", "797", "Smartwings, a.s.", "Smartwings, a.s.", "Smartwings", "Skytravel"),
    ("AE", "MDA", "803", "Mandarin Airlines Ltd.", "Mandarin Airlines Ltd.", "Mandarin Airlines", "Mandarin"),
    ("AK", "AXM", "807", "AirAsia Berhad dba AirAsia", "Air Asia Sen Bhd. t/a Air Asia", "AirAsia", "Red Cap"),
    ("EU", "UEA", "811", "Chengdu Airlines", "Chengdu Airlines", "Chengdu Airlines", "United Eagle"),
    ("EP", "IRC", "815", "Iran Aseman Airlines", "Iran Aseman Airline", "Iran Aseman Airlines", "Aseman"),
    ("RS", "ASV", "820", "Air Seoul, Inc", "Air Seoul, Inc.", "Air Seoul", "Air Seoul"),
    ("KN", "CUA", "822", "China United Airlines", "China United Airlines", "China United Airlines", "Lianhang"),
    ("GS", "GCR", "826", "TianJin Airlines Co. Ltd", "Tianjin Airlines Co. Ltd", "Tianjin Airlines", "Bo Hai"),
    ("PG", "BKP", "829", "Bangkok Airways Public Co., Ltd.", "Bangkok Airways Co. Ltd.", "Bangkok Airways", "Bangkok Air"),
    ("OU", "CTN", "831", "Croatia Airlines", "Croatia Airlines", "Croatia Airlines", "Croatia"),
    ("KY", "KNA", "833", "Kunming Airlines Co., Ltd.", "Kunming Airlines Co., Ltd.", "Kunming Airlines", "Kunming Air"),
    ("NS", "HBH", "836", "Hebei Airlines Co., Ltd.", "Hebei Airlines Co., Ltd.", "Hebei Airlines", "Hebei Air"),
    ("WS", "WJA", "838", "WestJet", "Westjet", "WestJet", "Westjet"),
    ("C5", "UCA", "841", "Champlain Enterprises Inc. dba Commutair", "Champlain Enterprises, Inc.", "CommutAir", "Commutair"),
    ("D7", "XAX", "843", "Airasia X Berhad dba Airasia X", "Airasia X Berhad d/b/a Airasia X", "AirAsia X", "Xanadu"),
    ("E5", "RBG", "844", "Air Arabia Egypt", "Air Arabia Egypt", "Air Arabia Egypt", "Arabia Egypt"),
    ("P5", "RPB", "845", "Aero Republica S.A.", "AeroRep�blica, S.A. t/a Copa Airlines Colombia", "Aero Republica", "Aerorepublica"),
    ("PN", "CHB", "847", "West Air Co., Ltd.", "China West Air Ltd.", "West Air (China)", "West China"),
    ("R3", "SYL", "849", "Joint Stock Company Aircompany \"Yakutia\"", "JSC Airline Yakutia", "Yakutia Airlines", "Air Yakutia"),
    ("HX", "CRK", "851", "Hong Kong Airlines Limited", "Hong Kong Airlines Limited", "Hong Kong Airlines", "Bauhinia"),
    ("TZ", "TDS", "852", "Tsaradia dba Tsaradia", "Tsaradia", "Tsaradia", "Tsaradia"),
    ("9H", "CGN", "856", "Changan Airlines Limited Company", "Changan Airlines Limited Company t/a Air Changan", "Air Changan", "Chang an"),
    ("8L", "LKE", "859", "Lucky Air Co. Ltd.", "Lucky Air Co. Ltd", "Lucky Air", "Lucky Air"),
    ("MR", "MML", "861", "Hunnu Air LLC", "Hunnu Air", "Hunnu Air", "Trans Mongolia"),
    ("BK", "OKA", "866", "Okay Airways Company Limited", "Okay Airways Company Limited", "Okay Airways", "Okayjet"),
    ("LT", "SNG", "867", "LongJiang Airlines Co.,Ltd.", "LongJiang Airlines Co., Ltd.", "LJ Air", "Snow Eagle"),
    ("Y8", "YZR", "871", "Suparna Airlines Co., Ltd.", "Suparna Airlines Co., Ltd.", "Suparna Airlines", "Yangtze River"),
    ("GX", "CBG", "872", "Guangxi Beibu Gulf Airlines Co.,Ltd", "Guangxi Beibu Gulf Airlines Co., Ltd.", "GX Airlines", "Green City"),
    ("H4", "HYS", "874", "Seven Four Eight Air Services(K)Limited", "HiSky Europe", "HiSky", "Sky Europe"),
    ("3U", "CSC", "876", "Sichuan Airlines Co. Ltd.", "Sichuan Airlines Co. Ltd.", "Sichuan Airlines", "Sichuan"),
    ("OQ", "CQN", "878", "Chongqing Airlines Co. Ltd", "Chong Qing Airlines Co., Ltd", "Chongqing Airlines", "Chong Qing"),
    ("G8", "GOW", "879", "Go Airlines (India) Limited", "Go Airlines (India) Pvt. Ltd.", "Go First", "goair"),
    ("HU", "CHH", "880", "Hainan Airlines Holding Company Limited", "Hainan Airlines Holding Company Limited", "Hainan Airlines", "Hainan"),
    ("DE", "CFG", "881", "Condor Flugdienst GmbH", "Condor Flugdienst GmbH", "Condor (airline)", "Condor"),
    ("UQ", "CUH", "886", "Urumqi Airlines Co. Ltd.", "Urumqi Airlines Co. Ltd.", "Urumqi Air", "Loulan"),
    ("GJ", "CDC", "891", "Zhejiang Loong Airlines Co., Ltd", "Zhejiang Loong Airlines Co., Ltd.", "Loong Air", "Loong Air"),
    ("DZ", "EPA", "893", "Donghai Airlines Co., Ltd", "Shenzhen Donghai Airlines Co. Ltd.", "Donghai Airlines", "Donghai Air"),
    ("CN", "GDC", "895", "Grand China Air Co. , Ltd.", "Grand China Air Co., Ltd.", "Grand China Air", "Grand China"),
    ("JD", "CBJ", "898", "Beijing Capital Airlines Co. Ltd.", "Beijing Capital Airlines Co., Ltd", "Beijing Capital Airlines", "Capital Jet"),
    ("ZL", "RXA", "899", "REGIONAL EXPRESS PTY LIMITED", "Australiawide Airlines Ltd. d/b/a Regional Express", "Rex Airlines", "Rex"),
    ("FD", "AIQ", "900", "Thai AirAsia Co., Ltd.", "Thai AirAsia Co. Ltd.", "Thai AirAsia", "Thai Asia"),
    ("AQ", "JYH", "902", "9 Air Co Ltd", "Nine Air Co., Ltd.", "9 Air", "Trans Jade"),
    ("4D", "ASD", "903", "Egypt Air Holding Company dba Air Sinai", "Egypt Air Holding Company d/b/a Air Sinai", "Air Sinai", "Air Sinai"),
    ("WE", "THD", "909", "Thai Smile Airways Company Limited", "Thai Smile Airways Company Limited", "Thai Smile", "Thai Smile"),
    ("WY", "OMA", "910", "Oman Air (S.A.O.C)", "Oman Air", "Oman Air", "Oman Air"),
    ("5U", "TGU", "911", "Transportes Aereos Guatemaltecos S.A.", "Transportes A�reos Guatemaltecos", "Transportes Aéreos Guatemaltecos", "Chapin"),
    ("QW", "QDA", "912", "Qingdao Airlines Co., Ltd", "Qingdao Airlines Co., Ltd.", "Qingdao Airlines", "Sky Legend"),
    ("SS", "CRL", "923", "Corsair t/a Corsair International", "Corse Air International", "Corsair International", "Corsair"),
    ("GR", "AUR", "924", "Aurigny Air Services Limited", "Aurigny Air Services Ltd.", "Aurigny", "Ayline"),
    ("QH", "BAV", "926", "Bamboo Airways Joint Stock Company dba Bamboo Airways Joint Stock Comp", "Bamboo Airways Joint Company Limited", "Bamboo Airways", "Bamboo"),
    ("UZ", "BRQ", "928", "Buraq Air dba Buraq Air", "Buraq Air Transport (BRQ)", "Buraq Air", "Buraqair"),
    ("JR", "JOY", "929", "Joy Air", "Joy Air Co., Ltd.", "Joy Air", "Joy Air"),
    ("OB", "BOV", "930", "Boliviana de Aviacion (BoA)", "Boliviana de Aviacion (BoA)", "Boliviana de Aviación", "Boliviana"),
    ("VS", "VIR", "932", "Virgin Atlantic Airways Limited", "Virgin Atlantic Airways Limited", "Virgin Atlantic", "Virgin"),
    ("TL", "ANO", "935", "Capiteq Limited dba Airnorth", "Airnorth Regional", "Airnorth", "Topend"),
    ("XJ", "TAX", "940", "Thai Airasia X Company Limited", "Thai Airasia X Company Limited", "Thai AirAsia X", "Express Wing"),
    ("VW", "TAO", "942", "Transportes Aeromar, S.A. de C.V.", "Transportes Aeromar, S.A. de C.V.", "Aeromar", "Trans-Aeromar"),
    ("LS", "EXS", "949", "Jet2.com Limited", "Jet2.com Limited", "Jet2.com", "Channex"),
    ("6B", "BLX", "951", "TUIfly Nordic AB", "TUIfly Nordic AB", "TUI fly Nordic", "Bluescan"),
    ("JJ", "TAM", "957", "TAM Linhas Aereas S.A. dba LATAM Airlines Brasil", "TAM Linhas Aereas S.A. d/b/a LATAM Airlines Brasil", "LATAM Brasil", "TAM"),
    ("LQ", "MKR", "961", "Lanmei Airlines (Cambodia) Co.,Ltd", "Lanmei Airlines (Cambodia) Co., Ltd.", "Lanmei Airlines", "Air Lanme"),
    ("PB", "PVL", "967", "PAL Airlines LTD. dba Provincial Airlines/PAL Airline", "PAL Airlines Ltd.", "PAL Airlines", "Provincial"),
    ("ZA", "SWM", "969", "Sky Angkor Airlines dba Sky Angkor Airlines Co., Ltd", "Sky Angkor Airlines Co., Ltd. d/b/a Sky Angkor Airlines", "Sky Angkor Airlines", "Sky Angkor"),
    ("LU", "LXP", "972", "Transporte Aereo S.A. dba LATAM Airlines Chile", "Transporte Aereo S.A. d/b/a LATAM Airlines Chile", "LATAM Express", "Lanex"),
    ("QZ", "AWQ", "975", "PT. Indonesia AirAsia dba AirAsia X Indonesia", "PT. Indonesia AirAsia", "Indonesia AirAsia", "Wagon Air"),
    ("SJ", "SJY", "977", "PT. Sriwijaya Air dba Sriwijaya Air", "Sriwijaya Air PT", "Sriwijaya Air", "Sriwijaya"),
    ("VJ", "VJC", "978", "Vietjet Aviation Joint Stock Compan dba Vietjet Aviation JSC", "Vietjet Aviation Joint Stock Company", "VietJet Air", "Vietjetair"),
    ("HV", "TRA", "979", "Transavia Airlines", "Transavia", "Transavia", "Transavia"),
    ("BX", "ABL", "982", "Air Busan", "Air Busan", "Air Busan", "Air Busan"),
    ("QK", "JZA", "983", "Jazz Aviation LP", "Jazz Aviation LP", "Jazz (airline)", "Jazz"),
    ("Q2", "DQA", "986", "Island Aviation Services Ltd.", "Island Aviation Services Ltd.", "Maldivian (airline)", "Island Aviation"),
    ("G5", "HXA", "987", "China Express Airlines", "China Express Airlines Co., Ltd", "China Express Airlines", "China Express"),
    ("OZ", "AAR", "988", "Asiana Airlines Inc.", "Asiana Airlines, Inc.", "Asiana Airlines", "Asiana"),
    ("RY", "CJX", "989", "Jiangxi Air Company Limited dba Jiangxi Air", "Jiangxi Air Company Limited d/b/a Jiangxi Air", "Jiangxi Air", "Air Crane"),
    ("D3", "DAO", "991", "Daallo Airlines", "Daallo Airlines", "Daallo Airlines", "Dalo Airlines"),
    ("WO", "WSW", "995", "Swoop Inc.", "Swoop, Inc", "Swoop (airline)", "Swoop"),
    ("UX", "AEA", "996", "Air Europa Lineas Aereas, S.A.", "Air Europa Lineas Aereas, S.A.", "Air Europa", "Europa"),
    ("BG", "BBC", "997", "Biman Bangladesh Airlines Limited", "Biman Bangladesh Airlines", "Biman Bangladesh Airlines", "Bangladesh"),
    ("KH", "AAH", "687", "Aeko Kula, LLC dba Aloha Air Cargo", "Aeko Kula, Inc d/b/a Aloha Air Cargo - United States of America", "Aloha Air Cargo", "Aloha"),
    ("CC", "ABD", "318", "Air Atlanta Icelandic", "Air Atlanta Icelandic - Iceland", "Air Atlanta Icelandic", "Atlanta"),
    ("RU", "ABW", "580", "AirBridgeCargo Airlines LLC", "AirBridge Cargo Airlines Limited - Russian Federation", "AirBridgeCargo Airlines", "AirBridge Cargo"),
    ("GB", "ABX", "832", "ABX Air, Inc.", "ABX Air, Inc. - United States of America", "ABX Air", "Abex"),
    ("JK", "ACL", "543", "Aerolinea Del Caribe S.A. dba Aercaribe S.A.", "Aercaribe Aerolina del Caribe, S.A. - Colombia", "AerCaribe S.A.", "Admire"),
    ("8V", "ACP", "485", "Astral Aviation Limited", "Astral Aviation Ltd. - Kenya", "Astral Aviation", "Astral Cargo"),
    ("KO", "AER", "341", "Alaska Central Express", "Alaska Central Express, Inc. - United States of America", "Alaska Central Express", "Ace Air"),
    ("LD", "AHK", "288", "AHK Air Hong Kong Limited dba AHK Air Hong Kong Limited", "AHK Air Hong Kong Limited - Hong Kong", "Air Hong Kong", "Air Hong Kong"),
    ("S8", "AHW", "442", "Sky Capital Airlines Ltd. dba Sky Air", "Sky Capital Airlines Ltd. - Bangladesh", "SkyAir", "Sky Capital"),
    ("KJ", "AIH", "994", "Air Incheon Co, Ltd", "Air Incheon Co., Ltd. - Korea, Republic of", "Air Incheon", "Air Incheon"),
    ("4W", "AJK", "574", "Allied Air Ltd.", "Allied Air Limited - Nigeria", "Allied Air", "Bambi"),
    ("M6", "AJT", "810", "Amerijet International Inc.", "Amerijet International, Inc. - United States of America", "Amerijet International", "Amerijet"),
    ("F5", "ATG", "227", "Aerotranscargo SRL", "Aerotranscargo SRL - Moldova, Republic of", "Aerotranscargo", "Moldcargo"),
    ("8C", "ATN", "813", "Air Transport International Inc.", "Air Transport International LLC - United States of America", "Air Transport International", "Air Transport"),
    ("ZT", "AWC", "858", "Titan Airways Limited", "Titan Airways Ltd. - United Kingdom", "Titan Airways", "Zap"),
    ("IX", "AXB", "236", "Air India Charters Limited", "Air India Charters Limited - India", "Air India Express", "Express India"),
    ("7L", "AZG", "501", "Silk Way West Airlines LLC", "Silk Way West Airlines - Azerbaijan", "Silk Way West Airlines", "Silk West"),
    ("ZR", "AZS", "410", "Aviacon Zitotrans Air Company JSC", "Aviacon Zitotrans Air Company JSC - Russian Federation", "Aviacon Zitotrans", "Zitotrans"),
    ("BO", "BBD", "290", "Blafugl ehf. dba Bluebird Cargo Ltd", "Bl�fugl ehf. d/b/a bluebird NORDIC - Iceland", "Bluebird Nordic", "Blue Cargo"),
    ("QY", "BCS", "615", "European Air Transport Leipzig", "European Air Transport Leipzig GmbH - Germany", "European Air Transport Leipzig", "EuroTrans"),
    ("BZ", "BDA", "620", "Blue Dart Aviation Ltd.", "Blue Dart Aviation Ltd - India", "Blue Dart Aviation", "Blue Dart"),
    ("BH", "BML", "256", "Bismillah Airlines Limited", "Bismillah Airlines Ltd. - Bangladesh", "Bismillah Airlines", "Bismillah"),
    ("3S", "BOX", "278", "Aerologic GmbH", "AeroLogic GmbH - Germany", "AeroLogic", "German Cargo"),
    ("KW", "BSC", "321", "LLC Air company AeroStan dba LLC Air company AeroStan", "AeroStan Aircompany - Kyrgyzstan", "", "Big Shot"),
    ("XC", "CAI", "395", "Turistik Hava Tasimacilik A.S. (Corendon Airlines)", "Turistik Hava Tasimacilik A.S. - Corendon Airlines - Turkey", "Corendon Airlines", "Corendon"),
    ("X7", "CHG", "744", "Challenge Airlines (BE) S.A.", "Challenge Airlines (BE) S.A. - Belgium", "Challenge Airlines", "Challenge"),
    ("W8", "CJT", "489", "Cargojet Airways Ltd.", "Cargojet Airways Ltd. - Canada", "Cargojet", "Cargojet"),
    ("CK", "CKK", "112", "China Cargo Airlines Ltd.", "China Cargo Airlines Ltd. - China", "China Cargo Airlines", "China King"),
    ("K4", "CKS", "272", "Kalitta Air, LLC", "Kalitta Air LLC - United States of America", "Kalitta Air", "Connie"),
    ("P3", "CLU", "560", "Cargologicair Ltd", "Cargologicair Ltd. - United Kingdom", "CargoLogicAir", "Firebird"),
    ("CV", "CLX", "172", "Cargolux Airlines International S.A", "Cargolux Airlines International, S.A. - Luxembourg", "Cargolux", "Cargolux"),
    ("CD", "CND", "503", "Corendon Dutch Airlines B.V.", "Corendon Dutch Airlines - Netherlands", "Corendon Dutch Airlines", "Dutch Corendon"),
    ("EF", "CPR", "497", "Aerolinea del Caribe  Peru S.A.C.", "Aerolinea del Caribe - Peru S.A.C. - Peru", "AerCaribe", "Caribe-Peru"),
    ("II", "CSQ", "175", "IBC Airways, Inc.", "IBC Airways, Inc. - United States of America", "IBC Airways", "Chasqui"),
    ("HT", "CTJ", "877", "Tianjin Air Cargo Co., Ltd.", "Tianjin Air Cargo Co., Ltd. - China", "Tianjin Air Cargo", "Tianjin Cargo"),
    ("CF", "CYZ", "804", "China Postal Airlines Ltd.", "China Postal Airlines Ltd. - China", "China Postal Airlines", "China Posta"),
    ("D5", "DAE", "992", "DHL Aero Expreso S.A.", "DHL Aero Expreso, S.A. - Panama", "DHL Aero Expreso", "YELLOW"),
    ("D0", "DHK", "936", "DHL Air Limited", "DHL Air Limited - United Kingdom", "DHL Air UK", "World Express"),
    ("ES", "DHX", "155", "DHL Aviation EEMEA B.S.C.(c)", "DHL Aviation EEMEA B.S.C(c) - Bahrain", "DHL International Aviation ME", "Dilmun"),
    ("WK", "EDW", "945", "Edelweiss Air AG", "Edelweiss Air AG - Switzerland", "Edelweiss Air", "Edelweiss"),
    ("8E", "EFX", "766", "Easy Fly Express Limited.", "Easy Fly Express Limited - Bangladesh", "Easy Fly Express", "Easy Express"),
    ("RF", "EOK", "358", "Erofey Limited Liability Company", "Aero K Airlines - Korea, Democratic People's Republic of", "Aero K", "Aerokorea"),
    ("E7", "ESF", "355", "Estafeta Carga Aerea, S.A. de C.V", "Estafeta Carga Aerea, S.A. de C.V. - Mexico", "Estafeta Carga Aérea", "ESTAFETA"),
    ("8D", "EXV", "319", "FITS Aviation (Pvt) Ltd", "FITS Aviation (Pvt) Ltd - Sri Lanka", "FitsAir", "Expoavia"),
    ("FX", "FDX", "023", "FedEx", "Federal Express Corporation d/b/a FedEx - United States of America", "FedEx", "Express"),
    ("ZQ", "GER", "944", "German Airways GmbH & Co.KG", "German Airways GmbH & Co.KG - Germany", "German Airways", "German Eagle"),
    ("GW", "GJT", "059", "GetJet Airlines", "GetJet Airlines - Lithuania", "GetJet Airlines", "Getjet"),
    ("5Y", "GTI", "369", "Atlas Air, Inc.", "Atlas Air, Inc. - United States of America", "Atlas Air", "Giant"),
    ("5K", "HFY", "026", "Hi Fly Transportes Aereos, S.A.", "Springjet, S.A. t/a HiFly - Portugal", "Hi Fly", "Sky Flyer"),
    ("YG", "HYT", "860", "YTO Cargo Airlines Co. Ltd.", "YTO Cargo Airlines Co., Ltd. - China", "YTO Cargo Airlines", "Quick Air"),
    ("5C", "ICL", "700", "C.A.L. Cargo Airlines Ltd.", "Cavei Avir Lemitanim t/a Cargo Air Lines - Israel", "CAL Cargo Airlines", "Cal"),
    ("C8", "ICV", "356", "Cargolux Italia S.p.A.", "Cargolux Italia S.p.A. - Italy", "Cargolux Italia", "Cargolux Italia"),
    ("TE", "IGA", "022", "Sky Taxi sp. z.o.o", "SkyTaxi sp. z.o.o. - Poland", "SkyTaxi", "iguana"),
    ("XM", "IMX", "927", "Zimex Aviation AG", "Zimex Aviation Limited - Switzerland", "Zimex Aviation", "Zimex"),
    ("JY", "IWY", "420", "National Air Charters, Inc.", "InterCaribbean Airways - Turks And Caicos Islands", "InterCaribbean Airways", "Islandways"),
    ("JA", "JAT", "973", "JETSMART SpA", "JetSMART SpA - Chile", "JetSmart", "Rocksmart"),
    ("L3", "JOS", "947", "DHL de Guatemala S.A.", "DHL de Guatemala, S.A. - Guatemala", "DHL de Guatemala", ""),
    ("3K", "JSA", "375", "Jetstar Asia Airways Pte Ltd", "Jetstar Asia Airways Pte Ltd - Singapore", "Jetstar Asia Airways", "Jetstar Asia"),
    ("FK", "KFA", "758", "Kelowna Flightcraft Air Charter Ltd dba KF Cargo", "Kelowna Flightcraft Air Charter Ltd. - Canada", "KF Cargo", "Flightcraft"),
    ("8K", "KMI", "119", "K-Mile Air Co. Ltd dba K-Mile Air", "K-Mile Air Co. Ltd. - Thailand", "K-Mile Air", "KAY-MILE AIR"),
    ("GO", "KZU", "444", "ULS Airlines Cargo", "ULS Havayollair Kargo Tasimacilik A.S. - Turkey", "ULS Airlines Cargo", "UNIVERSAL CARGO"),
    ("L7", "LAE", "985", "Linea Aerea Carguera de Colombia S. dba LATAM Cargo Colombia", "Lineas Aereas Carguera de Colombia S.A. d/b/a LATAM Cargo Colombia - Colombia", "LATAM Cargo Colombia", "Lanco"),
    ("UC", "LCO", "145", "Lan Cargo S.A. dba LATAM Cargo Chile", "LAN Cargo S.A. d/b/a LATAM Cargo Chile - Chile", "LATAM Cargo Chile", "LAN CARGO"),
    ("GI", "LHA", "908", "China Central Longhao Airlines Co. Ltd", "China Central Airlines Co., Ltd. - China", "Longhao Airlines", "Air Canton"),
    ("M3", "LTG", "549", "ABSA  -  Aerolinhas Brasileiras S.A dba LATAM Cargo Brasil", "ABSA - Aerolinhas Brasileiras S.A. d/b/a LATAM Cargo Brasil - Brazil", "LATAM Cargo Brasil", "Tamcargo"),
    ("L2", "LYC", "344", "Lynden Air Cargo, LLC", "Lynden Air Cargo, LLC - United States of America", "Lynden Air Cargo", "Lynden"),
    ("M7", "MAA", "865", "Aerotransportes Mas de Carga S.A. de C.V. dba Masair", "Aerotransportes Mas de Carga, S.A. de C.V. t/a MasAir - Mexico", "Mas Air", "MAS Carga"),
    ("T2", "MCS", "137", "MCS Aerocarga de Mexico, S.A. de CV", "TUM AeroCarga de Mexico, S.A. de C.V. - Mexico", "Mercury Air Cargo", "Carmex"),
    ("P9", "MGE", "046", "Aero Micronesia Inc. dba Asia Pacific Airlines", "Aero Micronesia Inc d/b/a Asia Pacific Airlines - Guam", "Asia Pacific Airlines", "Magellan"),
    ("M2", "MHV", "592", "Sunrise Airlines Inc.", "MHS Aviation GmbH - Germany", "MHS Aviation", "Snowcap"),
    ("DB", "MLT", "094", "MALETH-AERO AOC LIMITED", "Maleth-Aero AOC Ltd - Malta", "Maleth-Aero", "Maleth"),
    ("MB", "MNB", "716", "MNG Havayollari Tasimacilik A.S.", "MNG Airlines - Turkey", "MNG Airlines", "Black Sea"),
    ("MP", "MPH", "129", "Martinair Holland N.V.", "Martinair Holland N.V. - Netherlands", "Martinair", "Martinair"),
    ("M4", "MSA", "408", "Poste Air Cargo s.r.l. dba Poste Air Cargo", "Poste Air Cargo S.r.l. - Italy", "Poste Air Cargo", "Mistral Wings"),
    ("6M", "MXM", "387", "Maximus Airlines Limited Liability Company", "Maximus Airlines - Ukraine", "Maximus Air", "Maxlines"),
    ("2Y", "MYU", "585", "PT. My Indo Airlines", "PT. My Indo Airlines - Indonesia", "My Indo Airlines", "Indo"),
    ("NC", "NAC", "345", "Northern Air Cargo, LLC.", "Northern Air Cargo, LLC. - United States of America", "Northern Air Cargo", "Yukon"),
    ("KZ", "NCA", "933", "Nippon Cargo Airlines", "Nippon Cargo Airlines - Japan", "Nippon Cargo Airlines", "Nippon Cargo"),
    ("N7", "NEP", "264", "My Jet Xpress Airlines Sdn.Bhd. dba My Jet Xpress Airlines", "My Jet Xpress Airlines Sdn.Bhd. dba My Jet Xpress - Malaysia", "My Jet Xpress Airlines", "Warisan"),
    ("NO", "NOS", "703", "Neos S.P.A.", "Neos S.p.A. - Italy", "Neos", "Moonflower"),
    ("N9", "NVR", "326", "Nova Airlines AB", "Nova Airlines AB - Sweden", "Novair", "Navigator"),
    ("OV", "OMS", "960", "Salam Air (S.A.O.C)", "SalamAir - Oman", "Salam Air", "Mazoon"),
    ("PO", "PAC", "403", "Polar Air Cargo Worldwide, Inc.", "Polar Air Cargo Worldwide, Inc. - United States of America", "Polar Air Cargo", "Polar"),
    ("TH", "RMY", "539", "Raya Airways Sdn. Bhd. dba Raya Airways", "Raya Airways Sdn. Bhd. d/b/a Raya Airways - Malaysia", "Raya Airways", "Raya Express"),
    ("7T", "RTM", "144", "Aero Express del Ecuador  - Trans A", "Aero Express Del Ecuador Trans AM - Ecuador", "DHL Ecuador", "Aero Transam"),
    ("9T", "RUN", "556", "ACT Havayollari A.S.", "ACT Havayollari A.S. (ACT Airlines) - Turkey", "Air ACT", "Cargo Turk"),
    ("U3", "SAY", "728", "Air Company \"Sky Gates Airlines\" Limited Liability Company", "Air Company \"Sky Gates Airlines\" LLC - Russian Federation", "Sky Gates Airlines", "Sky Path"),
    ("4E", "SBO", "242", "Stabo Air Limited", "Stabo Air Limited - Zambia", "Stabo Air", "Stabair"),
    ("9S", "SOO", "099", "Southern Air Inc.", "Southern Air, Inc. - United States of America", "Southern Air", "Southern Air"),
    ("PQ", "SQP", "010", "LLC \"SKYUP AIRLINES\"", "SkyUp Airlines - Ukraine", "SkyUp", "Skyup"),
    ("DJ", "SRR", "763", "Star Air A/S", "Star Air A/S - Denmark", "Star Air", "Whitestar"),
    ("WT", "SWT", "221", "Swiftair, S.A.", "Swiftair, S.A. - Spain", "Swiftair", "Swift"),
    ("T7", "TIW", "382", "Transcarga Int'l Airways, C.A.", "Transcarga International Airways, C.A. - Venezuela", "Transcarga", "TIACA"),
    ("6R", "TNO", "873", "Aerotransporte de Carga Union, S.A. dba Aerounion", "Aerotransporte de Carga Union, S.A. de C.V. - Mexico", "AeroUnion", "Aerounion"),
    ("BY", "TOM", "754", "TUI Airways Limited dba TUI", "TUI Airways Limited - United Kingdom", "TUI Airways", "Tomjet"),
    ("QT", "TPA", "729", "Tampa Cargo S.A.S", "Transportes Aereos Mercantiles Panamericanos S.A., (TAMPA) t/a Avianca Cargo - Colombia", "Avianca Cargo", "Tampa"),
    ("V2", "TWN", "552", "Avialeasing Aviation Company", "Avialeasing Aviation Company - Uzbekistan", "Avialeasing", "Twinarrow"),
    ("5X", "UPS", "406", "UPS", "United Parcel Service Company (UPS) - United States of America", "UPS", "UPS"),
    ("UW", "UTP", "699", "Uni-Top Airlines Co.,Ltd", "Uni-Top Airlines - China", "Uni-Top Airlines", "Uni-Top"),
    ("VI", "VDA", "412", "Volga-Dnepr Airline Joint Stock", "Volga-Dnepr Airline Joint Stock - Russian Federation", "Volga-Dnepr", "Volga"),
    ("V4", "VEC", "946", "Vensecar Internacional C.A.", "Vensecar Internacional, C.A. - Venezuela", "Vensecar Internacional", "Vecar"),
    ("DK", "VKG", "630", "Sunclass Airlines Aps", "SunClass Airlines ApS - Denmark", "Sunclass Airlines", "Viking"),
    ("WD", "VVA", "352", "Limited Liability Company Aviation Company Eleron", "LLC Aviation Company Eleron - Ukraine", "Eleron Airlines", "Load Shark"),
    ("3G", "WCM", "380", "World Cargo Airline Sdn Bhd. dba World Cargo Airlines", "World Cargo Airlines Sdn. Bhd. - Malaysia", "World Cargo Airline", "World Cargo"),
    ("KD", "WGN", "904", "Western Global Airlines, Inc.", "Western Global Airlines, Inc. - United States of America", "Western Global Airlines", "Western Global"),
    ("7A", "XRC", "336", "Express Air Cargo", "Express Air Cargo - Tunisia", "Express Air Cargo", "TUNISIA CARGO"),
)
# fmt: on
