"""
Closed-form coefficient tables for the geodesic series.

Each function evaluates the truncation of one defining integral at a
selectable order (1 to 8). Order 8 gives full double precision for any
terrestrial flattening. Arrays returned have exactly `order` entries.

Notation:
    u2 = ep2 * cos(alpha0)**2, the squared-Clairaut-scaled second eccentricity
    mu = cos(alpha0)**2
    f  = flattening

tau is the reparametrization of the auxiliary-sphere arc length sigma that
advances in proportion to distance:

    s / b = tau_scale(u2) * tau
    tau   = sigma + S(sigma; tau_coeff(u2))
    sigma = tau + S(tau; sig_coeff(u2))

where S is the sine series of geodesic_solver.core.series.sin_series. The
ellipsoidal longitude correction is

    chi12 = lam12 + sin(alpha0) * dlam_scale(f, mu) * (sigma12 + S(sigma2) - S(sigma1))

with S built from dlam_coeff(f, mu). The *_mu variants are partial
derivatives with respect to mu.
"""
from typing import List


def tau_scale(u2: float, order: int = 8) -> float:
    """Scale factor converting tau to s / b."""
    if order <= 1:
        return (u2+4)/4
    elif order == 2:
        return ((16-3*u2)*u2+64)/64
    elif order == 3:
        return (u2*(u2*(5*u2-12)+64)+256)/256
    elif order == 4:
        return (u2*(u2*((320-175*u2)*u2-768)+4096)+16384)/16384
    elif order == 5:
        return (u2*(u2*(u2*(u2*(441*u2-700)+1280)-3072)+16384)+65536)/65536
    elif order == 6:
        return ((u2*(u2*(u2*(u2*((7056-4851*u2)*u2-11200)+20480)-49152)+262144)+
            1048576)/1048576)
    elif order == 7:
        return ((u2*(u2*(u2*(u2*(u2*(u2*(14157*u2-19404)+28224)-44800)+81920)-
            196608)+1048576)+4194304)/4194304)
    else:
        return ((u2*(u2*(u2*(u2*(u2*(u2*((3624192-2760615*u2)*u2-4967424)+7225344)-
            11468800)+20971520)-50331648)+268435456)+1073741824.0)/1073741824.0)


def tau_coeff(u2: float, order: int = 8) -> List[float]:
    """Coefficients of the sine series converting sigma to tau."""
    c = []
    t = u2
    if order <= 1:
        c.append(-t/8)
    elif order == 2:
        c.append(t*(u2-2)/16)
        t *= u2
        c.append(-t/256)
    elif order == 3:
        c.append(t*((64-37*u2)*u2-128)/1024)
        t *= u2
        c.append(t*(u2-1)/256)
        t *= u2
        c.append(-t/3072)
    elif order == 4:
        c.append(t*(u2*(u2*(47*u2-74)+128)-256)/2048)
        t *= u2
        c.append(t*((32-27*u2)*u2-32)/8192)
        t *= u2
        c.append(t*(3*u2-2)/6144)
        t *= u2
        c.append(-5*t/131072)
    elif order == 5:
        c.append(t*(u2*(u2*((752-511*u2)*u2-1184)+2048)-4096)/32768)
        t *= u2
        c.append(t*(u2*(u2*(22*u2-27)+32)-32)/8192)
        t *= u2
        c.append(t*((384-423*u2)*u2-256)/786432)
        t *= u2
        c.append(t*(10*u2-5)/131072)
        t *= u2
        c.append(-7*t/1310720)
    elif order == 6:
        c.append(t*(u2*(u2*(u2*(u2*(731*u2-1022)+1504)-2368)+4096)-8192)/65536)
        t *= u2
        c.append(t*(u2*(u2*((22528-18313*u2)*u2-27648)+32768)-32768)/8388608)
        t *= u2
        c.append(t*(u2*(u2*(835*u2-846)+768)-512)/1572864)
        t *= u2
        c.append(t*((160-217*u2)*u2-80)/2097152)
        t *= u2
        c.append(t*(35*u2-14)/2621440)
        t *= u2
        c.append(-7*t/8388608)
    elif order == 7:
        c.append(t*(u2*(u2*(u2*(u2*((374272-278701*u2)*u2-523264)+770048)-1212416)+
            2097152)-4194304)/33554432)
        t *= u2
        c.append(t*(u2*(u2*(u2*(u2*(15003*u2-18313)+22528)-27648)+32768)-32768)/
            8388608)
        t *= u2
        c.append(t*(u2*(u2*((53440-50241*u2)*u2-54144)+49152)-32768)/100663296)
        t *= u2
        c.append(t*(u2*(u2*(251*u2-217)+160)-80)/2097152)
        t *= u2
        c.append(t*((2240-3605*u2)*u2-896)/167772160)
        t *= u2
        c.append(t*(21*u2-7)/8388608)
        t *= u2
        c.append(-33*t/234881024)
    else:
        c.append(t*(u2*(u2*(u2*(u2*(u2*(u2*(428731*u2-557402)+748544)-1046528)+
            1540096)-2424832)+4194304)-8388608)/67108864)
        t *= u2
        c.append(t*(u2*(u2*(u2*(u2*((480096-397645*u2)*u2-586016)+720896)-884736)+
            1048576)-1048576)/268435456)
        t *= u2
        c.append(t*(u2*(u2*(u2*(u2*(92295*u2-100482)+106880)-108288)+98304)-65536)/
            201326592)
        t *= u2
        c.append(t*(u2*(u2*((128512-136971*u2)*u2-111104)+81920)-40960)/1073741824.0)
        t *= u2
        c.append(t*(u2*(u2*(9555*u2-7210)+4480)-1792)/335544320)
        t *= u2
        c.append(t*((672-1251*u2)*u2-224)/268435456)
        t *= u2
        c.append(t*(231*u2-66)/469762048)
        t *= u2
        c.append(-429*t/17179869184.0)
    return c


def sig_coeff(u2: float, order: int = 8) -> List[float]:
    """Coefficients of the sine series converting tau to sigma (reverts tau_coeff)."""
    d = []
    t = u2
    if order <= 1:
        d.append(t/8)
    elif order == 2:
        d.append(t*(2-u2)/16)
        t *= u2
        d.append(5*t/256)
    elif order == 3:
        d.append(t*(u2*(71*u2-128)+256)/2048)
        t *= u2
        d.append(t*(5-5*u2)/256)
        t *= u2
        d.append(29*t/6144)
    elif order == 4:
        d.append(t*(u2*((142-85*u2)*u2-256)+512)/4096)
        t *= u2
        d.append(t*(u2*(383*u2-480)+480)/24576)
        t *= u2
        d.append(t*(58-87*u2)/12288)
        t *= u2
        d.append(539*t/393216)
    elif order == 5:
        d.append(t*(u2*(u2*(u2*(20797*u2-32640)+54528)-98304)+196608)/1572864)
        t *= u2
        d.append(t*(u2*((383-286*u2)*u2-480)+480)/24576)
        t *= u2
        d.append(t*(u2*(2907*u2-2784)+1856)/393216)
        t *= u2
        d.append(t*(539-1078*u2)/393216)
        t *= u2
        d.append(3467*t/7864320)
    elif order == 6:
        d.append(t*(u2*(u2*(u2*((41594-27953*u2)*u2-65280)+109056)-196608)+393216)/
            3145728)
        t *= u2
        d.append(t*(u2*(u2*(u2*(429221*u2-585728)+784384)-983040)+983040)/50331648)
        t *= u2
        d.append(t*(u2*((5814-5255*u2)*u2-5568)+3712)/786432)
        t *= u2
        d.append(t*(u2*(111407*u2-86240)+43120)/31457280)
        t *= u2
        d.append(t*(6934-17335*u2)/15728640)
        t *= u2
        d.append(38081*t/251658240)
    elif order == 7:
        d.append(t*(u2*(u2*(u2*(u2*(u2*(7553633*u2-10733952)+15972096)-25067520)+
            41877504)-75497472)+150994944)/1207959552.0)
        t *= u2
        d.append(t*(u2*(u2*(u2*((429221-314863*u2)*u2-585728)+784384)-983040)+
            983040)/50331648)
        t *= u2
        d.append(t*(u2*(u2*(u2*(1133151*u2-1345280)+1488384)-1425408)+950272)/
            201326592)
        t *= u2
        d.append(t*(u2*((111407-118621*u2)*u2-86240)+43120)/31457280)
        t *= u2
        d.append(t*(u2*(2563145*u2-1664160)+665664)/1509949440.0)
        t *= u2
        d.append(t*(38081-114243*u2)/251658240)
        t *= u2
        d.append(459485*t/8455716864.0)
    else:
        d.append(t*(u2*(u2*(u2*(u2*(u2*((15107266-11062823*u2)*u2-21467904)+
            31944192)-50135040)+83755008)-150994944)+301989888)/2415919104.0)
        t *= u2
        d.append(t*(u2*(u2*(u2*(u2*(u2*(112064929*u2-151134240)+206026080)-
            281149440)+376504320)-471859200)+471859200)/24159191040.0)
        t *= u2
        d.append(t*(u2*(u2*(u2*((2266302-1841049*u2)*u2-2690560)+2976768)-2850816)+
            1900544)/402653184)
        t *= u2
        d.append(t*(u2*(u2*(u2*(174543337*u2-182201856)+171121152)-132464640)+
            66232320)/48318382080.0)
        t *= u2
        d.append(t*(u2*((5126290-6292895*u2)*u2-3328320)+1331328)/3019898880.0)
        t *= u2
        d.append(t*(u2*(45781749*u2-25590432)+8530144)/56371445760.0)
        t *= u2
        d.append(t*(918970-3216395*u2)/16911433728.0)
        t *= u2
        d.append(109167851*t/5411658792960.0)
    return d


def dlam_scale(f: float, mu: float, order: int = 8) -> float:
    """Scale of the first-order ellipsoidal longitude correction."""
    if order <= 1:
        g = -1.0
    elif order == 2:
        g = (f*mu-4)/4
    elif order == 3:
        g = (f*(f*(4-3*mu)*mu+4*mu)-16)/16
    elif order == 4:
        g = (f*(f*(f*mu*(mu*(25*mu-54)+32)+(32-24*mu)*mu)+32*mu)-128)/128
    elif order == 5:
        g = ((f*(f*(f*(f*mu*(mu*((720-245*mu)*mu-720)+256)+mu*(mu*(200*mu-
            432)+256))+(256-192*mu)*mu)+256*mu)-1024)/1024)
    elif order == 6:
        g = ((f*(f*(f*(f*(f*mu*(mu*(mu*(mu*(1323*mu-4900)+6800)-4224)+1024)+
            mu*(mu*((2880-980*mu)*mu-2880)+1024))+mu*(mu*(800*mu-1728)+1024))+(1024-
            768*mu)*mu)+1024*mu)-4096)/4096)
    elif order == 7:
        g = ((f*(f*(f*(f*(f*(f*mu*(mu*(mu*(mu*((34020-7623*mu)*mu-60200)+
            52800)-23040)+4096)+mu*(mu*(mu*(mu*(5292*mu-19600)+27200)-16896)+4096))+
            mu*(mu*((11520-3920*mu)*mu-11520)+4096))+mu*(mu*(3200*mu-6912)+4096))+
            (4096-3072*mu)*mu)+4096*mu)-16384)/16384)
    else:
        g = ((f*(f*(f*(f*(f*(f*(f*mu*(mu*(mu*(mu*(mu*(mu*(184041*mu-960498)+
            2063880)-2332400)+1459200)-479232)+65536)+mu*(mu*(mu*(mu*((544320-121968*
            mu)*mu-963200)+844800)-368640)+65536))+mu*(mu*(mu*(mu*(84672*mu-313600)+
            435200)-270336)+65536))+mu*(mu*((184320-62720*mu)*mu-184320)+65536))+mu*
            (mu*(51200*mu-110592)+65536))+(65536-49152*mu)*mu)+65536*mu)-262144)/
            262144)
    return f * g


def dlam_scale_mu(f: float, mu: float, order: int = 8) -> float:
    """Partial derivative of dlam_scale with respect to mu."""
    if order <= 1:
        h = 0.0
    elif order == 2:
        h = 0.25
    elif order == 3:
        h = (f*(2-3*mu)+2)/8
    elif order == 4:
        h = (f*(f*(mu*(75*mu-108)+32)-48*mu+32)+32)/128
    elif order == 5:
        h = ((f*(f*(f*(mu*((540-245*mu)*mu-360)+64)+mu*(150*mu-216)+64)-96*
            mu+64)+64)/256)
    elif order == 6:
        h = ((f*(f*(f*(f*(mu*(mu*(mu*(6615*mu-19600)+20400)-8448)+1024)+mu*
            ((8640-3920*mu)*mu-5760)+1024)+mu*(2400*mu-3456)+1024)-1536*mu+1024)+
            1024)/4096)
    elif order == 7:
        h = ((f*(f*(f*(f*(f*(mu*(mu*(mu*((85050-22869*mu)*mu-120400)+79200)-
            23040)+2048)+mu*(mu*(mu*(13230*mu-39200)+40800)-16896)+2048)+mu*((17280-
            7840*mu)*mu-11520)+2048)+mu*(4800*mu-6912)+2048)-3072*mu+2048)+2048)/8192)
    else:
        h = ((f*(f*(f*(f*(f*(f*(mu*(mu*(mu*(mu*(mu*(1288287*mu-5762988)+
            10319400)-9329600)+4377600)-958464)+65536)+mu*(mu*(mu*((2721600-731808*
            mu)*mu-3852800)+2534400)-737280)+65536)+mu*(mu*(mu*(423360*mu-1254400)+
            1305600)-540672)+65536)+mu*((552960-250880*mu)*mu-368640)+65536)+mu*
            (153600*mu-221184)+65536)-98304*mu+65536)+65536)/262144)
    return h * f * f


def dlam_coeff(f: float, mu: float, order: int = 8) -> List[float]:
    """Coefficients of the higher-order longitude correction series."""
    e = []
    s = f * mu
    t = s
    if order <= 1:
        e.append(t/8)
    elif order == 2:
        e.append((f*(4-3*mu)+4)*t/32)
        t *= s
        e.append(t/64)
    elif order == 3:
        e.append((f*(f*(mu*(51*mu-112)+64)-48*mu+64)+64)*t/512)
        t *= s
        e.append((f*(18-13*mu)+8)*t/512)
        t *= s
        e.append(5*t/1536)
    elif order == 4:
        e.append((f*(f*(f*(mu*((764-255*mu)*mu-768)+256)+mu*(204*mu-448)+256)-192*mu+
            256)+256)*t/2048)
        t *= s
        e.append((f*(f*(mu*(79*mu-190)+120)-52*mu+72)+32)*t/2048)
        t *= s
        e.append((f*(72-51*mu)+20)*t/6144)
        t *= s
        e.append(7*t/8192)
    elif order == 5:
        e.append((f*(f*(f*(f*(mu*(mu*(mu*(701*mu-2646)+3724)-2304)+512)+mu*((1528-
            510*mu)*mu-1536)+512)+mu*(408*mu-896)+512)-384*mu+512)+512)*t/4096)
        t *= s
        e.append((f*(f*(f*(mu*((1610-487*mu)*mu-1816)+704)+mu*(316*mu-760)+480)-208*
            mu+288)+128)*t/8192)
        t *= s
        e.append((f*(f*(mu*(813*mu-2056)+1360)-408*mu+576)+160)*t/49152)
        t *= s
        e.append((f*(70-49*mu)+14)*t/16384)
        t *= s
        e.append(21*t/81920)
    elif order == 6:
        e.append((f*(f*(f*(f*(f*(mu*(mu*(mu*((74558-16411*mu)*mu-134064)+118720)-
            51200)+8192)+mu*(mu*(mu*(11216*mu-42336)+59584)-36864)+8192)+mu*((24448-
            8160*mu)*mu-24576)+8192)+mu*(6528*mu-14336)+8192)-6144*mu+8192)+8192)*t/
            65536)
        t *= s
        e.append((f*(f*(f*(f*(mu*(mu*(mu*(12299*mu-51072)+80360)-56960)+15360)+mu*
            ((25760-7792*mu)*mu-29056)+11264)+mu*(5056*mu-12160)+7680)-3328*mu+4608)+
            2048)*t/131072)
        t *= s
        e.append((f*(f*(f*(mu*((10567-3008*mu)*mu-12712)+5280)+mu*(1626*mu-4112)+
            2720)-816*mu+1152)+320)*t/98304)
        t *= s
        e.append((f*(f*(mu*(485*mu-1266)+860)-196*mu+280)+56)*t/65536)
        t *= s
        e.append((f*(540-375*mu)+84)*t/327680)
        t *= s
        e.append(11*t/131072)
    elif order == 7:
        e.append((f*(f*(f*(f*(f*(f*(mu*(mu*(mu*(mu*(mu*(803251*mu-4262272)+9306208)-
            10659328)+6707200)-2162688)+262144)+mu*(mu*(mu*((2385856-525152*mu)*mu-
            4290048)+3799040)-1638400)+262144)+mu*(mu*(mu*(358912*mu-1354752)+
            1906688)-1179648)+262144)+mu*((782336-261120*mu)*mu-786432)+262144)+mu*
            (208896*mu-458752)+262144)-196608*mu+262144)+262144)*t/2097152)
        t *= s
        e.append((f*(f*(f*(f*(f*(mu*(mu*(mu*((1579066-317733*mu)*mu-3149568)+
            3154560)-1587200)+319488)+mu*(mu*(mu*(196784*mu-817152)+1285760)-911360)+
            245760)+mu*((412160-124672*mu)*mu-464896)+180224)+mu*(80896*mu-194560)+
            122880)-53248*mu+73728)+32768)*t/2097152)
        t *= s
        e.append((f*(f*(f*(f*(mu*(mu*(mu*(346689*mu-1534256)+2588016)-1980928)+
            583680)+mu*((676288-192512*mu)*mu-813568)+337920)+mu*(104064*mu-263168)+
            174080)-52224*mu+73728)+20480)*t/6291456)
        t *= s
        e.append((f*(f*(f*(mu*((123082-33633*mu)*mu-154232)+66640)+mu*(15520*mu-
            40512)+27520)-6272*mu+8960)+1792)*t/2097152)
        t *= s
        e.append((f*(f*(mu*(35535*mu-94800)+65520)-12000*mu+17280)+2688)*t/10485760)
        t *= s
        e.append((f*(1386-957*mu)+176)*t/2097152)
        t *= s
        e.append(429*t/14680064)
    else:
        e.append((f*(f*(f*(f*(f*(f*(f*(mu*(mu*(mu*(mu*(mu*((30816920-5080225*mu)*mu-
            79065664)+110840000)-91205632)+43638784)-11010048)+1048576)+mu*(mu*(mu*
            (mu*(mu*(3213004*mu-17049088)+37224832)-42637312)+26828800)-8650752)+
            1048576)+mu*(mu*(mu*((9543424-2100608*mu)*mu-17160192)+15196160)-
            6553600)+1048576)+mu*(mu*(mu*(1435648*mu-5419008)+7626752)-4718592)+
            1048576)+mu*((3129344-1044480*mu)*mu-3145728)+1048576)+mu*(835584*mu-
            1835008)+1048576)-786432*mu+1048576)+1048576)*t/8388608)
        t *= s
        e.append((f*(f*(f*(f*(f*(f*(mu*(mu*(mu*(mu*(mu*(2092939*mu-12074982)+
            29005488)-37129344)+26700800)-10207232)+1605632)+mu*(mu*(mu*((6316264-
            1270932*mu)*mu-12598272)+12618240)-6348800)+1277952)+mu*(mu*(mu*(787136*
            mu-3268608)+5143040)-3645440)+983040)+mu*((1648640-498688*mu)*mu-
            1859584)+720896)+mu*(323584*mu-778240)+491520)-212992*mu+294912)+131072)*
            t/8388608)
        t *= s
        e.append((f*(f*(f*(f*(f*(mu*(mu*(mu*((13101384-2474307*mu)*mu-28018000)+
            30323072)-16658432)+3727360)+mu*(mu*(mu*(1386756*mu-6137024)+10352064)-
            7923712)+2334720)+mu*((2705152-770048*mu)*mu-3254272)+1351680)+mu*
            (416256*mu-1052672)+696320)-208896*mu+294912)+81920)*t/25165824)
        t *= s
        e.append((f*(f*(f*(f*(mu*(mu*(mu*(273437*mu-1265846)+2238200)-1799088)+
            557760)+mu*((492328-134532*mu)*mu-616928)+266560)+mu*(62080*mu-162048)+
            110080)-25088*mu+35840)+7168)*t/8388608)
        t *= s
        e.append((f*(f*(f*(mu*((1333160-353765*mu)*mu-1718160)+761600)+mu*(142140*mu-
            379200)+262080)-48000*mu+69120)+10752)*t/41943040)
        t *= s
        e.append((f*(f*(mu*(39633*mu-107426)+75152)-11484*mu+16632)+2112)*t/25165824)
        t *= s
        e.append((f*(16016-11011*mu)+1716)*t/58720256)
        t *= s
        e.append(715*t/67108864)
    return e


def dlam_coeff_mu(f: float, mu: float, order: int = 8) -> List[float]:
    """Partial derivatives of dlam_coeff with respect to mu."""
    h = []
    s = f * mu
    t = f
    if order <= 1:
        h.append(t/8)
    elif order == 2:
        h.append((f*(2-3*mu)+2)*t/16)
        t *= s
        h.append(t/32)
    elif order == 3:
        h.append((f*(f*(mu*(153*mu-224)+64)-96*mu+64)+64)*t/512)
        t *= s
        h.append((f*(36-39*mu)+16)*t/512)
        t *= s
        h.append(5*t/512)
    elif order == 4:
        h.append((f*(f*(f*(mu*((573-255*mu)*mu-384)+64)+mu*(153*mu-224)+64)-96*mu+
            64)+64)*t/512)
        t *= s
        h.append((f*(f*(mu*(158*mu-285)+120)-78*mu+72)+32)*t/1024)
        t *= s
        h.append((f*(18-17*mu)+5)*t/512)
        t *= s
        h.append(7*t/2048)
    elif order == 5:
        h.append((f*(f*(f*(f*(mu*(mu*(mu*(3505*mu-10584)+11172)-4608)+512)+mu*((4584-
            2040*mu)*mu-3072)+512)+mu*(1224*mu-1792)+512)-768*mu+512)+512)*t/4096)
        t *= s
        h.append((f*(f*(f*(mu*((6440-2435*mu)*mu-5448)+1408)+mu*(1264*mu-2280)+960)-
            624*mu+576)+256)*t/8192)
        t *= s
        h.append((f*(f*(mu*(4065*mu-8224)+4080)-1632*mu+1728)+480)*t/49152)
        t *= s
        h.append((f*(280-245*mu)+56)*t/16384)
        t *= s
        h.append(21*t/16384)
    elif order == 6:
        h.append((f*(f*(f*(f*(f*(mu*(mu*(mu*((186395-49233*mu)*mu-268128)+178080)-
            51200)+4096)+mu*(mu*(mu*(28040*mu-84672)+89376)-36864)+4096)+mu*((36672-
            16320*mu)*mu-24576)+4096)+mu*(9792*mu-14336)+4096)-6144*mu+4096)+4096)*t/
            32768)
        t *= s
        h.append((f*(f*(f*(f*(mu*(mu*(mu*(36897*mu-127680)+160720)-85440)+15360)+mu*
            ((51520-19480*mu)*mu-43584)+11264)+mu*(10112*mu-18240)+7680)-4992*mu+
            4608)+2048)*t/65536)
        t *= s
        h.append((f*(f*(f*(mu*((52835-18048*mu)*mu-50848)+15840)+mu*(8130*mu-16448)+
            8160)-3264*mu+3456)+960)*t/98304)
        t *= s
        h.append((f*(f*(mu*(1455*mu-3165)+1720)-490*mu+560)+112)*t/32768)
        t *= s
        h.append((f*(270-225*mu)+42)*t/32768)
        t *= s
        h.append(33*t/65536)
    elif order == 7:
        h.append((f*(f*(f*(f*(f*(f*(mu*(mu*(mu*(mu*(mu*(5622757*mu-25573632)+
            46531040)-42637312)+20121600)-4325376)+262144)+mu*(mu*(mu*((11929280-
            3150912*mu)*mu-17160192)+11397120)-3276800)+262144)+mu*(mu*(mu*(1794560*
            mu-5419008)+5720064)-2359296)+262144)+mu*((2347008-1044480*mu)*mu-
            1572864)+262144)+mu*(626688*mu-917504)+262144)-393216*mu+262144)+262144)*
            t/2097152)
        t *= s
        h.append((f*(f*(f*(f*(f*(mu*(mu*(mu*((9474396-2224131*mu)*mu-15747840)+
            12618240)-4761600)+638976)+mu*(mu*(mu*(1180704*mu-4085760)+5143040)-
            2734080)+491520)+mu*((1648640-623360*mu)*mu-1394688)+360448)+mu*(323584*
            mu-583680)+245760)-159744*mu+147456)+65536)*t/2097152)
        t *= s
        h.append((f*(f*(f*(f*(mu*(mu*(mu*(2426823*mu-9205536)+12940080)-7923712)+
            1751040)+mu*((3381440-1155072*mu)*mu-3254272)+1013760)+mu*(520320*mu-
            1052672)+522240)-208896*mu+221184)+61440)*t/6291456)
        t *= s
        h.append((f*(f*(f*(mu*((738492-235431*mu)*mu-771160)+266560)+mu*(93120*mu-
            202560)+110080)-31360*mu+35840)+7168)*t/2097152)
        t *= s
        h.append((f*(f*(mu*(49749*mu-113760)+65520)-14400*mu+17280)+2688)*t/2097152)
        t *= s
        h.append((f*(8316-6699*mu)+1056)*t/2097152)
        t *= s
        h.append(429*t/2097152)
    else:
        h.append((f*(f*(f*(f*(f*(f*(f*(mu*(mu*(mu*(mu*(mu*((53929610-10160450*mu)*mu-
            118598496)+138550000)-91205632)+32729088)-5505024)+262144)+mu*(mu*(mu*
            (mu*(mu*(5622757*mu-25573632)+46531040)-42637312)+20121600)-4325376)+
            262144)+mu*(mu*(mu*((11929280-3150912*mu)*mu-17160192)+11397120)-
            3276800)+262144)+mu*(mu*(mu*(1794560*mu-5419008)+5720064)-2359296)+
            262144)+mu*((2347008-1044480*mu)*mu-1572864)+262144)+mu*(626688*mu-
            917504)+262144)-393216*mu+262144)+262144)*t/2097152)
        t *= s
        h.append((f*(f*(f*(f*(f*(f*(mu*(mu*(mu*(mu*(mu*(8371756*mu-42262437)+
            87016464)-92823360)+53401600)-15310848)+1605632)+mu*(mu*(mu*((18948792-
            4448262*mu)*mu-31495680)+25236480)-9523200)+1277952)+mu*(mu*(mu*(2361408*
            mu-8171520)+10286080)-5468160)+983040)+mu*((3297280-1246720*mu)*mu-
            2789376)+720896)+mu*(647168*mu-1167360)+491520)-319488*mu+294912)+
            131072)*t/4194304)
        t *= s
        h.append((f*(f*(f*(f*(f*(mu*(mu*(mu*((22927422-4948614*mu)*mu-42027000)+
            37903840)-16658432)+2795520)+mu*(mu*(mu*(2426823*mu-9205536)+12940080)-
            7923712)+1751040)+mu*((3381440-1155072*mu)*mu-3254272)+1013760)+mu*
            (520320*mu-1052672)+522240)-208896*mu+221184)+61440)*t/6291456)
        t *= s
        h.append((f*(f*(f*(f*(mu*(mu*(mu*(1093748*mu-4430461)+6714600)-4497720)+
            1115520)+mu*((1476984-470862*mu)*mu-1542320)+533120)+mu*(186240*mu-
            405120)+220160)-62720*mu+71680)+14336)*t/4194304)
        t *= s
        h.append((f*(f*(f*(mu*((466606-141506*mu)*mu-515448)+190400)+mu*(49749*mu-
            113760)+65520)-14400*mu+17280)+2688)*t/2097152)
        t *= s
        h.append((f*(f*(mu*(158532*mu-375991)+225456)-40194*mu+49896)+6336)*t/
            12582912)
        t *= s
        h.append((f*(4004-3146*mu)+429)*t/2097152)
        t *= s
        h.append(715*t/8388608)
    return h
